"""
Exceptions raised by DSA key operations.

Every error may carry a ``detail``: the diagnostic text of the underlying
library failure, kept for debugging only.
"""


class KeyException(Exception):
    """
    Base class for all failures reported by dsakeys.
    """

    def __init__(self, message="", detail=None):
        Exception.__init__(self, message, detail)
        self.message = message
        self.detail = detail

    def __str__(self):
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class KeyMaterialError(KeyException):
    """
    Grouping class for problems with the numbers making up a key.
    """

    pass


class KeyMaterialInvalid(KeyMaterialError):
    """
    A key component could not be turned into an integer.

    :param str field: name of the offending component (``"p"``, ``"x"``...)
    """

    def __init__(self, field, detail=None):
        KeyMaterialError.__init__(
            self, f"invalid key component {field!r}", detail
        )
        self.field = field


class KeyMaterialMissing(KeyMaterialError):
    """
    A key component that should always be present was not set.
    """

    def __init__(self, field):
        KeyMaterialError.__init__(self, f"missing key component {field!r}")
        self.field = field


class NotAPrivateKey(KeyMaterialError):
    """
    An operation needing the private value was attempted on a public key.
    """

    def __init__(self, operation):
        KeyMaterialError.__init__(
            self, f"{operation} requires a private key"
        )
        self.operation = operation


class ParameterGenerationFailed(KeyException):
    """
    Domain parameters (p, q, g) could not be generated.
    """

    def __init__(self, bits, detail=None):
        KeyException.__init__(
            self, f"could not generate {bits}-bit DSA parameters", detail
        )
        self.bits = bits


class KeyPairGenerationFailed(KeyException):
    """
    A key pair could not be generated from valid domain parameters.
    """

    def __init__(self, bits, detail=None):
        KeyException.__init__(
            self, f"could not generate a {bits}-bit DSA key pair", detail
        )
        self.bits = bits


class SigningError(KeyException):
    pass


class VerificationError(KeyException):
    """
    Verification could not be carried out, as opposed to the signature
    simply being wrong (which is reported as ``False``).
    """

    pass


class FileOpenError(KeyException):
    """
    A key file could not be opened.
    """

    def __init__(self, path, detail=None):
        KeyException.__init__(self, f"cannot open {path!r}", detail)
        self.path = path


class PEMEncodingError(KeyException):
    pass
