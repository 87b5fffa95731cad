# -*- coding:utf-8 -*-

from .config import get_config
from .request import Request
from .response import Response
from .status import FOUND, INTERNAL_SERVER_ERROR, METHOD_NOT_ALLOWED, STATUS_MESSAGES


class RequestHandler:
    SUPPORTED_METHODS = ("get", "post", "head", "put", "delete", "patch", "options")

    def __init__(self, request:Request, config=None):
        self.request = request
        self.config = config
        self.response = self.setup_response()

    def setup_response(self):
        return Response(self.request, self.config)

    def set_status(self, code):
        return self.response.status(code)

    def set_header(self, name, value):
        self.response.header(name, value)

    def set_cookie(self, name, value="", expiry=None, path="/", domain=None, secure=False, httponly=False):
        return self.response.set_cookie(name, value, expiry, path, domain, secure, httponly)

    def clear_cookie(self, name):
        return self.response.unset_cookie(name)

    def no_cache(self):
        self.response.no_cache()

    def write(self, body):
        self.response.write(body)

    def write_error(self, code, body=""):
        self.response.status(code)
        if code == METHOD_NOT_ALLOWED:
            self.set_header("Allow", ", ".join(self.allowed_methods()))
        if not body:
            body = "Error {0}".format(STATUS_MESSAGES[code])
        self.write(body)

    def json(self, value, callback=None):
        return self.response.json(value, callback)

    def redirect(self, url=".", code=FOUND):
        return self.response.redirect(url, code)

    def require_secure(self):
        return self.response.secure()

    def get(self):
        self.write_error(METHOD_NOT_ALLOWED)

    def post(self):
        self.write_error(METHOD_NOT_ALLOWED)

    def head(self):
        self.write_error(METHOD_NOT_ALLOWED)

    @classmethod
    def allowed_methods(cls):
        # 子类实现了的请求方法
        allowed = []
        for name in cls.SUPPORTED_METHODS:
            method = getattr(cls, name, None)
            if method is None or method is getattr(RequestHandler, name, None):
                continue
            allowed.append(name.upper())
        return allowed

    @classmethod
    def wsgi_app(cls, config=None):
        """
        将处理类包装成WSGI应用，根据请求方法调用对应的函数
        :param config:
        :return:
        """
        def application(environ, start_response):
            request = Request.from_environ(environ)
            handler = cls(request, config)
            method = None
            if request.method in cls.SUPPORTED_METHODS:
                method = getattr(handler, request.method, None)
            try:
                if method is None:
                    handler.write_error(METHOD_NOT_ALLOWED)
                else:
                    method()
            except Exception:
                logger = (config or get_config()).get_logger()
                logger.exception("%s %s failed", request.method.upper(), request.path)
                handler.response = handler.setup_response()
                handler.write_error(INTERNAL_SERVER_ERROR)
            return handler.response.as_wsgi(start_response, include_body=request.method != "head")
        return application
