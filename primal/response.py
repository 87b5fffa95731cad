# -*- coding:utf-8 -*-

import io
import json
import time

from . import utils
from .config import get_config
from .errors import ResponseFinished
from .request import Request
from .status import OK, FOUND, STATUS_MESSAGES, status_message


class Finished:
    """ json()和redirect()的返回值，表示响应已经结束，调用方应停止后续处理 """
    def __init__(self, response):
        self.response = response

    def __bool__(self):
        return True

    def __repr__(self):
        return f"Finished({self.response.status()})"


# Http响应对象
class Response:

    def __init__(self, request=None, config=None):
        self.request = request if request is not None else Request()     # type: Request
        self.config = config if config is not None else get_config()
        self.logger = self.config.get_logger()
        self.status_code = None     # 最后一次设置的状态码
        self.status_line = None
        self.headers = {}
        self.cookies = {}
        self.finished = False
        self.charset = self.config.charset
        self._body = io.BytesIO()

    def status(self, code=None):
        """
        设置/获取状态码，建议使用status模块中的常量
        :param code: 状态码，必须在STATUS_MESSAGES中
        :return: 最后一次设置的状态码，没有设置过返回200
        """
        if code:
            self._check_writable()
            message = status_message(code)
            protocol = self.request.version or self.config.default_protocol
            self.status_code = code
            self.status_line = "{0} {1}".format(protocol, message)
            self.logger.debug("status %s", self.status_line)
        return self.status_code or OK

    def header(self, name, value=""):
        # 不会对值中的控制字符做转义
        self._check_writable()
        self.headers[utils.header_name(name)] = str(value)

    def get_header(self, name):
        return self.headers.get(utils.header_name(name), None)

    def set_cookie(self, name, value="", expiry=None, path="/", domain=None, secure=False, httponly=False):
        """
        设置Cookie
        :param name: Cookie名称
        :param value: Cookie内容
        :param expiry: 默认30天, 可以是时间戳(0表示会话Cookie)、datetime或字符串
        :param path: 默认是域名的根目录
        :param domain: 默认是当前域名
        :param secure: 只通过HTTPS传输
        :param httponly: 不允许脚本读取
        :return: 是否设置成功
        """
        if self.finished:
            self.logger.warning("set_cookie %s ignored, response already finished", name)
            return False
        if not utils.valid_cookie_name(name):
            self.logger.warning("invalid cookie name %r", name)
            return False
        now = time.time()
        try:
            expires = utils.expiry_timestamp(expiry, self.config.cookie_lifetime, now)
        except (TypeError, ValueError) as e:
            # 无法识别的过期时间按会话Cookie处理
            self.logger.warning("cookie %s expiry %r not understood, using session cookie: %s", name, expiry, e)
            expires = 0
        parts = ["{0}={1}".format(name, utils.cookie_quote(value))]
        if expires:
            parts.append("Expires={0}".format(utils.http_date(expires)))
            parts.append("Max-Age={0}".format(max(0, expires - int(now))))
        if path:
            parts.append("Path={0}".format(path))
        if domain:
            parts.append("Domain={0}".format(domain))
        if secure:
            parts.append("Secure")
        if httponly:
            parts.append("HttpOnly")
        self.cookies[name] = "; ".join(parts)
        return True

    def unset_cookie(self, name):
        # 设置为空值并且过期时间是过去的时间，浏览器会删除这个Cookie
        return self.set_cookie(name, "", 1)

    def no_cache(self):
        self.header("Pragma", "no-cache")
        self.header("Cache-Control", "no-store, no-cache")

    def set_charset(self, charset):
        # 替换已有的charset参数，write()也使用同样的编码
        self.charset = charset
        content_type = self.get_header("Content-Type")
        if content_type is None:
            self.header("Content-Type", "text/html; charset={0}".format(charset))
            return
        params = [p.strip() for p in content_type.split(";")]
        params = [p for p in params if p and not p.lower().startswith("charset=")]
        params.append("charset={0}".format(charset))
        self.header("Content-Type", "; ".join(params))

    def write(self, text):
        self._check_writable()
        if isinstance(text, str):
            self._body.write(text.encode(self.charset))
        elif isinstance(text, bytes):
            self._body.write(text)
        else:
            raise ValueError("text must be str or bytes")

    def json(self, value, callback=None):
        """
        以json格式输出，并结束响应
        :param value: 可以被json序列化的对象
        :param callback: JSONP的回调函数名
        :return: Finished
        """
        self._check_writable()
        # 不像PHP的json_encode那样把 / 转义成 \/，两种都是合法的json
        data = json.dumps(value, separators=(",", ":"))
        self.header("Content-Type", self.config.json_content_type)
        if callback:
            self.write(";{0}({1});".format(callback, data))
        else:
            self.write(data)
        self.logger.debug("json response %d bytes", self._body.tell())
        return self._finish()

    def redirect(self, url=".", code=FOUND):
        """
        重定向并结束响应
        :param url: 默认是当前请求的地址
        :param code: 默认302
        :return: Finished
        """
        self.status(code)
        if url == ".":
            url = self.request.path or "/"
        self.header("Location", url)
        self.logger.debug("redirect %s -> %s", code, url)
        return self._finish()

    def secure(self):
        # 如果不是HTTPS请求，则重定向到HTTPS
        if self.request.secure:
            return None
        return self.redirect("https://{0}{1}".format(self.request.host or "", self.request.path or "/"))

    @property
    def body(self):
        return self._body.getvalue()

    def headers_list(self):
        headers = list(self.headers.items())
        for value in self.cookies.values():
            headers.append(("Set-Cookie", value))
        return headers

    def _before_write_header(self):
        # 发送前补充默认的响应头
        self.headers.setdefault("Content-Type", "text/html; charset={0}".format(self.charset))
        self.headers.setdefault("Date", utils.http_date(time.time()))
        self.headers.setdefault("Content-Length", str(self._body.tell()))

    def send(self, session):
        """
        将响应写入到会话中，session需要提供write(str)和write_raw(bytes)
        :param session:
        :return:
        """
        self._before_write_header()
        status_line = self.status_line
        if not status_line:
            protocol = self.request.version or self.config.default_protocol
            status_line = "{0} {1}".format(protocol, STATUS_MESSAGES[OK])
        session.write("{0}\r\n".format(status_line))
        for name, value in self.headers_list():
            session.write("{0}: {1}\r\n".format(name, value))
        session.write("\r\n")
        session.write_raw(self.body)

    def as_wsgi(self, start_response, include_body=True):
        # HEAD请求只发送响应头，Content-Length仍然是body的长度
        self._before_write_header()
        start_response(STATUS_MESSAGES[self.status()], self.headers_list())
        if not include_body:
            return [b""]
        return [self.body]

    def _check_writable(self):
        if self.finished:
            self.logger.warning("write to finished response refused")
            raise ResponseFinished()

    def _finish(self):
        self.finished = True
        return Finished(self)

    def __str__(self):
        return f"Response(status_code={self.status()}, headers={self.headers}, finished={self.finished})"
