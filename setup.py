# -*- coding:utf-8 -*-

"""
打包成一个whl包
pip install -e .[test]
"""

from setuptools import setup

setup(
    name='primal',
    version='1.0.0',
    author="Jeff Xun",
    description="HTTP响应辅助工具：状态码、响应头、Cookie、JSON输出和重定向",
    packages=['primal'],
    install_requires=[],  # 如果有依赖，添加在这里
    extras_require={
        'test': ['pytest'],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
