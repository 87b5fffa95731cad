# -*- coding:utf-8 -*-


class PrimalError(Exception):
    pass


class StatusCodeError(PrimalError, KeyError):
    def __init__(self, code):
        super().__init__(code)
        self.code = code

    def __str__(self):
        return "unknown http status code: {0!r}".format(self.code)


class ResponseFinished(PrimalError):
    # json()/redirect()之后响应已经结束，不能再写入
    def __init__(self, msg="response already finished"):
        super().__init__(msg)
        self.msg = msg
