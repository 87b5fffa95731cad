# -*- coding:utf-8 -*-
import datetime
import email.utils
import re
import time
import urllib.parse


# Cookie名称中不能出现的字符
COOKIE_NAME_INVALID = set("=,; \t\r\n\013\014")

_RELATIVE_UNITS = {
    "sec": 1,
    "second": 1,
    "min": 60,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
    "week": 86400 * 7,
    "fortnight": 86400 * 14,
}

# 按月计算的单位，需要日历运算
_CALENDAR_UNITS = {
    "month": 1,
    "year": 12,
}

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_RELATIVE_RE = re.compile(r"([+-]?)\s*(\d+)\s*(sec|second|min|minute|hour|day|week|fortnight|month|year)s?\b", re.I)
_NEXT_LAST_RE = re.compile(r"^(next|last)\s+([a-z]+)$", re.I)


def http_date(timestamp):
    # Expires/Date使用的GMT时间格式，不受locale影响
    return email.utils.formatdate(timestamp, usegmt=True)


def header_name(name):
    """
    规范响应头的名称，content-type 和 content type 都会变成 Content-Type
    只处理每个单词的首字母，其他字母保持不变
    :param name:
    :return:
    """
    words = str(name).replace("-", " ").split(" ")
    return "-".join(word[:1].upper() + word[1:] for word in words)


def valid_cookie_name(name):
    if not name:
        return False
    return not COOKIE_NAME_INVALID.intersection(name)


def cookie_quote(value):
    # Cookie的值需要url编码
    return urllib.parse.quote(str(value), safe="")


def parse_time(text, now=None):
    """
    将字符串解析为时间戳
    支持: RFC 822/1123 日期, ISO 8601, now/today/tomorrow/yesterday,
    相对时间如 "+1 week 2 days", "+1 month", "next monday", "last year"
    :param text:
    :param now: 当前时间戳，默认为time.time()
    :return: 整数时间戳
    """
    if now is None:
        now = time.time()
    value = text.strip()
    if not value:
        raise ValueError("empty time string")
    lower = value.lower()
    if lower == "now":
        return int(now)
    if lower in ("today", "tomorrow", "yesterday"):
        offset = {"today": 0, "tomorrow": 1, "yesterday": -1}[lower]
        return int((_midnight(now) + datetime.timedelta(days=offset)).timestamp())

    relative = _parse_next_last(lower, now)
    if relative is None:
        relative = _parse_relative(value, now)
    if relative is not None:
        return relative

    try:
        parsed = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        parsed = None
    if parsed is None:
        try:
            parsed = datetime.datetime.fromisoformat(value)
        except ValueError:
            raise ValueError("unable to parse time string: {0!r}".format(text)) from None
    return int(parsed.timestamp())


def _midnight(now):
    return datetime.datetime.fromtimestamp(now).replace(hour=0, minute=0, second=0, microsecond=0)


def _add_months(moment, months):
    # 和strtotime一样，1月31日加一个月会顺延到3月初
    index = moment.year * 12 + moment.month - 1 + months
    year, month = divmod(index, 12)
    first = moment.replace(year=year, month=month + 1, day=1)
    return first + datetime.timedelta(days=moment.day - 1)


def _parse_relative(value, now):
    # 整个字符串都必须是相对时间片段，否则返回None
    pos = 0
    seconds = 0
    months = 0
    matched = False
    for m in _RELATIVE_RE.finditer(value):
        if value[pos:m.start()].strip():
            return None
        sign, amount, unit = m.groups()
        amount = -int(amount) if sign == "-" else int(amount)
        unit = unit.lower()
        if unit in _CALENDAR_UNITS:
            months += amount * _CALENDAR_UNITS[unit]
        else:
            seconds += amount * _RELATIVE_UNITS[unit]
        pos = m.end()
        matched = True
    if not matched or value[pos:].strip():
        return None
    if not months:
        return int(now + seconds)
    moment = _add_months(datetime.datetime.fromtimestamp(now), months)
    return int(moment.timestamp() + seconds)


def _parse_next_last(lower, now):
    # next monday / last friday 取当天零点，next week / last month 相当于 +1/-1 个单位
    m = _NEXT_LAST_RE.match(lower)
    if not m:
        return None
    forward = m.group(1) == "next"
    word = m.group(2)
    if word in _WEEKDAYS:
        today = _midnight(now)
        if forward:
            days = (_WEEKDAYS.index(word) - today.weekday()) % 7 or 7
        else:
            days = -((today.weekday() - _WEEKDAYS.index(word)) % 7 or 7)
        return int((today + datetime.timedelta(days=days)).timestamp())
    if word in _RELATIVE_UNITS or word in _CALENDAR_UNITS:
        return _parse_relative("{0}1 {1}".format("+" if forward else "-", word), now)
    return None


def expiry_timestamp(expiry, lifetime, now=None):
    """
    Cookie过期时间转换为时间戳
    None表示从现在开始lifetime秒后过期，0表示会话Cookie
    :param expiry: None, 时间戳, datetime 或 字符串
    :param lifetime: 默认有效秒数
    :param now:
    :return:
    """
    if now is None:
        now = time.time()
    if expiry is None:
        return int(now + lifetime)
    if isinstance(expiry, datetime.datetime):
        return int(expiry.timestamp())
    if isinstance(expiry, bool):
        raise TypeError("cookie expiry must not be a bool")
    if isinstance(expiry, (int, float)):
        return int(expiry)
    if isinstance(expiry, str):
        return parse_time(expiry, now)
    raise TypeError("unsupported cookie expiry type: {0}".format(type(expiry).__name__))
