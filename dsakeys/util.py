"""
Useful functions used by the rest of dsakeys.
"""
import logging
import threading

from dsakeys.common import DEBUG


def inflate_long(s):
    """turns a big-endian byte string into a non-negative long-int"""
    return int.from_bytes(s, "big")


def deflate_long(n):
    """turns a long-int into a normalized big-endian byte string

    The result is the shortest encoding of ``n``, with no sign byte; zero
    encodes to an empty string, the way OpenSSL's ``BN_bn2bin`` does.
    """
    n = int(n)
    if n < 0:
        raise ValueError("cannot encode a negative integer")
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def b(s, encoding="utf8"):
    """cast unicode or bytes to bytes"""
    if isinstance(s, bytes):
        return s
    elif isinstance(s, (bytearray, memoryview)):
        return bytes(s)
    elif isinstance(s, str):
        return s.encode(encoding)
    else:
        raise TypeError(f"Expected unicode or bytes, got {type(s)}")


def u(s, encoding="utf8"):
    """cast bytes or unicode to unicode"""
    if isinstance(s, bytes):
        return s.decode(encoding)
    elif isinstance(s, str):
        return s
    else:
        raise TypeError(f"Expected unicode or bytes, got {type(s)}")


_g_thread_data = threading.local()
_g_thread_counter = 0
_g_thread_lock = threading.Lock()


def get_thread_id():
    global _g_thread_counter
    try:
        return _g_thread_data.id
    except AttributeError:
        with _g_thread_lock:
            _g_thread_counter += 1
            ret = _g_thread_data.id = _g_thread_counter
        return ret


def log_to_file(filename, level=DEBUG):
    """send dsakeys logs to a logfile,
    if they're not already going somewhere"""
    logger = logging.getLogger("dsakeys")
    if len(logger.handlers) > 0:
        return
    logger.setLevel(level)
    f = open(filename, "a")
    handler = logging.StreamHandler(f)
    frm = "%(levelname)-.3s [%(asctime)s.%(msecs)03d] thr=%(_threadid)-3d"
    frm += " %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(frm, "%Y%m%d-%H:%M:%S"))
    logger.addHandler(handler)


# make only one filter object, so it doesn't get applied more than once
class PFilter:
    def filter(self, record):
        record._threadid = get_thread_id()
        return True


_pfilter = PFilter()


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addFilter(_pfilter)
    return logger
