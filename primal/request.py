# -*- coding:utf-8 -*-


# Http请求的上下文，响应只需要读取其中的几个值
class Request:
    def __init__(self, path="/", host=None, secure=False, version=None, method="get"):
        self.method = method
        self.path = path
        self.host = host
        self.secure = secure
        self.version = version      # type: str or None
        self.headers = {}

    @classmethod
    def from_environ(cls, environ):
        """
        从WSGI的environ中创建请求对象
        :param environ:
        :return:
        """
        https = environ.get("HTTPS", "")
        secure = https.lower() == "on" or environ.get("wsgi.url_scheme") == "https"
        host = environ.get("HTTP_HOST") or environ.get("SERVER_NAME")
        path = environ.get("REQUEST_URI")
        if not path:
            path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
            query = environ.get("QUERY_STRING")
            if query:
                path = "{0}?{1}".format(path, query)
        request = cls(path=path or "/",
                      host=host,
                      secure=secure,
                      version=environ.get("SERVER_PROTOCOL"),
                      method=environ.get("REQUEST_METHOD", "GET").lower())
        for key, value in environ.items():
            if key.startswith("HTTP_"):
                request.headers[key[5:].replace("_", "-").lower()] = value
        return request

    def get_header(self, name):
        return self.headers.get(name.lower(), None)

    def __str__(self):
        return f"Request(method={self.method}, path={self.path}, host={self.host}, secure={self.secure})"
