# -*- coding:utf-8 -*-

import logging

import pytest

import primal
from primal import HttpConfig, Request, RequestHandler


def environ_for(method="GET", path="/", query="", https=False, **extra):
    environ = {
        "REQUEST_METHOD": method,
        "PATH_INFO": path,
        "QUERY_STRING": query,
        "SERVER_NAME": "localhost",
        "SERVER_PROTOCOL": "HTTP/1.1",
        "HTTP_HOST": "app.example.com",
        "wsgi.url_scheme": "https" if https else "http",
    }
    environ.update(extra)
    return environ


def call(app, environ):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


class ApiHandler(RequestHandler):
    def get(self):
        self.no_cache()
        self.set_cookie("seen", "1")
        return self.json({"path": self.request.path}, self.request.get_header("x-callback"))

    def post(self):
        self.require_secure()
        if self.response.finished:
            return
        self.set_status(201)
        self.write("created")


class PageHandler(RequestHandler):
    def get(self):
        self.write("hello")

    head = get


class BrokenHandler(RequestHandler):
    def get(self):
        raise RuntimeError("boom")


def test_request_from_environ():
    request = Request.from_environ(environ_for(path="/items", query="page=2", HTTP_X_TOKEN="t"))
    assert request.method == "get"
    assert request.path == "/items?page=2"
    assert request.host == "app.example.com"
    assert request.version == "HTTP/1.1"
    assert request.secure is False
    assert request.get_header("X-Token") == "t"


def test_request_from_environ_prefers_request_uri_and_https_flag():
    request = Request.from_environ({"REQUEST_URI": "/raw?x=1", "HTTPS": "ON", "SERVER_NAME": "srv"})
    assert request.path == "/raw?x=1"
    assert request.secure is True
    assert request.host == "srv"
    assert request.version is None


def test_wsgi_get_json():
    app = ApiHandler.wsgi_app()
    status, headers, body = call(app, environ_for(path="/items"))
    assert status == "200 OK"
    assert headers["Content-Type"] == "application/json"
    assert headers["Pragma"] == "no-cache"
    assert headers["Set-Cookie"].startswith("seen=1; Expires=")
    assert body == b'{"path":"/items"}'


def test_wsgi_get_jsonp():
    app = ApiHandler.wsgi_app()
    _, _, body = call(app, environ_for(path="/items", HTTP_X_CALLBACK="load"))
    assert body == b';load({"path":"/items"});'


def test_wsgi_post_requires_https():
    app = ApiHandler.wsgi_app()
    status, headers, body = call(app, environ_for("POST", "/items"))
    assert status == "302 Found"
    assert headers["Location"] == "https://app.example.com/items"

    status, _, body = call(app, environ_for("POST", "/items", https=True))
    assert status == "201 Created"
    assert body == b"created"


def test_wsgi_unknown_method_is_405():
    app = ApiHandler.wsgi_app()
    status, headers, body = call(app, environ_for("DELETE"))
    assert status == "405 Method Not Allowed"
    assert headers["Allow"] == "GET, POST"
    assert body == b"Error 405 Method Not Allowed"
    status, _, _ = call(app, environ_for("JSON"))
    assert status == "405 Method Not Allowed"


def test_wsgi_head_sends_headers_only():
    app = PageHandler.wsgi_app()
    status, headers, body = call(app, environ_for("HEAD"))
    assert status == "200 OK"
    assert headers["Content-Length"] == "5"
    assert body == b""
    _, _, body = call(app, environ_for("GET"))
    assert body == b"hello"


def test_wsgi_head_without_handler_is_405_without_body():
    app = ApiHandler.wsgi_app()
    status, headers, body = call(app, environ_for("HEAD"))
    assert status == "405 Method Not Allowed"
    assert headers["Allow"] == "GET, POST"
    assert body == b""


def test_wsgi_handler_error_is_logged(caplog):
    app = BrokenHandler.wsgi_app()
    with caplog.at_level(logging.ERROR, logger="primal"):
        status, _, _ = call(app, environ_for())
    assert status == "500 Internal Server Error"
    assert "GET / failed" in caplog.text


def test_handler_redirect_and_clear_cookie():
    handler = RequestHandler(Request(path="/here"))
    assert handler.clear_cookie("sid") is True
    assert handler.redirect()
    assert handler.response.get_header("Location") == "/here"
    assert handler.response.cookies["sid"].startswith("sid=; Expires=Thu, 01 Jan 1970")


def test_configure_applies_logger_level():
    config = HttpConfig()
    config.set_logger_level(logging.DEBUG)
    primal.configure(config)
    assert primal.get_config() is config
    assert logging.getLogger("primal").level == logging.DEBUG
    config.logger.setLevel(logging.NOTSET)


def test_config_validation():
    config = HttpConfig()
    config.set_default_protocol("HTTP/1.1")
    assert primal.Response(config=config).status(404) == 404
    with pytest.raises(ValueError):
        config.set_default_protocol("SPDY")


def test_module_log_helpers(caplog):
    with caplog.at_level(logging.DEBUG, logger="primal"):
        primal.debug("debug %s", 1)
        primal.warning("warn %s", 2)
    assert "debug 1" in caplog.text
    assert "warn 2" in caplog.text
