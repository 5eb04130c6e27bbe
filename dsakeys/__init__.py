from dsakeys.dsakey import DSAKey
from dsakeys.intermediate import DSAIntermediateKey
from dsakeys.key_exception import (
    FileOpenError,
    KeyException,
    KeyMaterialError,
    KeyMaterialInvalid,
    KeyMaterialMissing,
    KeyPairGenerationFailed,
    NotAPrivateKey,
    ParameterGenerationFailed,
    PEMEncodingError,
    SigningError,
    VerificationError,
)
from dsakeys.pkey import PKey, SignatureCheck, Verdict
from dsakeys.util import log_to_file

__version__ = "1.0.0"

__all__ = [
    "DSAIntermediateKey",
    "DSAKey",
    "FileOpenError",
    "KeyException",
    "KeyMaterialError",
    "KeyMaterialInvalid",
    "KeyMaterialMissing",
    "KeyPairGenerationFailed",
    "NotAPrivateKey",
    "ParameterGenerationFailed",
    "PEMEncodingError",
    "PKey",
    "SignatureCheck",
    "SigningError",
    "Verdict",
    "VerificationError",
    "log_to_file",
]
