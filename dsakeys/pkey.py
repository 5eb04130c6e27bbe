"""
Common API for keys.
"""
import enum
import os

from dsakeys.common import o600
from dsakeys.key_exception import FileOpenError
from dsakeys.util import u


class Verdict(enum.Enum):
    VALID = "valid"
    INVALID = "invalid"
    ERROR = "error"


class SignatureCheck:
    """
    Outcome of checking a signature.

    A signature is either `Verdict.VALID`, `Verdict.INVALID` (badly encoded,
    or not made by this key over this digest), or the check itself could not
    be carried out (`Verdict.ERROR`), in which case ``detail`` holds whatever
    diagnostic text the crypto backend produced.
    """

    def __init__(self, verdict, detail=None):
        self.verdict = verdict
        self.detail = detail

    @classmethod
    def valid(cls):
        return cls(Verdict.VALID)

    @classmethod
    def invalid(cls, detail=None):
        return cls(Verdict.INVALID, detail)

    @classmethod
    def error(cls, detail):
        return cls(Verdict.ERROR, detail)

    @property
    def ok(self):
        return self.verdict is Verdict.VALID

    @property
    def is_error(self):
        return self.verdict is Verdict.ERROR

    def __bool__(self):
        return self.ok

    def __eq__(self, other):
        if isinstance(other, Verdict):
            return self.verdict is other
        if isinstance(other, SignatureCheck):
            return self.verdict is other.verdict
        return NotImplemented

    def __hash__(self):
        return hash(self.verdict)

    def __repr__(self):
        if self.detail:
            return f"SignatureCheck({self.verdict.value}, {self.detail!r})"
        return f"SignatureCheck({self.verdict.value})"


class PKey:
    """
    Base class for keys.

    Subclasses provide ``_fields`` (the tuple equality and hashing are based
    on), ``to_pem`` and ``from_pem``; file handling lives here.
    """

    name = None

    @property
    def _fields(self):
        raise NotImplementedError

    def __eq__(self, other):
        return isinstance(other, PKey) and self._fields == other._fields

    def __hash__(self):
        return hash(self._fields)

    def get_bits(self):
        """
        Return the number of significant bits in this key.  This is useful
        for judging the relative security of a key.

        :return: bits in the key (as an `int`)
        """
        return 0

    def can_sign(self):
        """
        Return ``True`` if this key has the private part necessary for signing
        data.
        """
        return False

    def to_pem(self):
        """
        Return this key as PEM-armored `bytes`: the private key block for a
        private key, the public key block otherwise.
        """
        raise NotImplementedError

    @classmethod
    def from_pem(cls, data):
        raise NotImplementedError

    @classmethod
    def from_pem_file(cls, filename):
        """
        Create a key object by reading an unencrypted PEM key file.

        :param str filename: name of the file to read
        :return: a new `.PKey` based on the file contents

        :raises: `.FileOpenError` -- if the file could not be read
        :raises: `.PEMEncodingError` -- if the contents are not a usable key
        """
        try:
            with open(filename, "rb") as f:
                data = f.read()
        except OSError as e:
            raise FileOpenError(filename, str(e)) from e
        return cls.from_pem(data)

    def write_pem(self, file_obj):
        """
        Write the PEM form of this key into a text-mode file (or file-like)
        object.

        :param file_obj: the file-like object to write into
        """
        file_obj.write(u(self.to_pem()))

    def write_pem_file(self, filename):
        """
        Write the PEM form of this key into a file, replacing any previous
        contents.  The key is never encrypted.

        :param str filename: name of the file to write

        :raises: `.FileOpenError` -- if the file could not be opened
        :raises: `.PEMEncodingError` -- if the key could not be encoded
        """
        # Encode first so a bad key doesn't clobber an existing file.
        data = self.to_pem()
        try:
            # New files are created user-only rather than chmodded after
            # the fact; O_TRUNC/O_CREAT are no-ops where they don't apply.
            fd = os.open(
                filename,
                flags=os.O_WRONLY | os.O_TRUNC | os.O_CREAT,
                mode=o600,
            )
        except OSError as e:
            raise FileOpenError(filename, str(e)) from e
        with os.fdopen(fd, "w") as f:
            f.write(u(data))
