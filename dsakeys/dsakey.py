"""
DSA keys.
"""
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa
from cryptography.hazmat.primitives.asymmetric.utils import (
    Prehashed,
    decode_dss_signature,
)

from dsakeys import util
from dsakeys.common import DEBUG, DEFAULT_BITS, VALID_BITS, zero_byte
from dsakeys.intermediate import DSAIntermediateKey
from dsakeys.key_exception import (
    KeyMaterialInvalid,
    KeyMaterialMissing,
    KeyPairGenerationFailed,
    NotAPrivateKey,
    ParameterGenerationFailed,
    PEMEncodingError,
    SigningError,
    VerificationError,
)
from dsakeys.pkey import PKey, SignatureCheck

_log = util.get_logger(__name__)


def _to_int(key, field):
    value = getattr(key, field, None)
    if value is None:
        raise KeyMaterialInvalid(field, "not set")
    try:
        value = util.b(value)
    except TypeError as e:
        raise KeyMaterialInvalid(field, str(e)) from e
    if len(value) == 0:
        raise KeyMaterialInvalid(field, "empty byte string")
    return util.inflate_long(value)


class DSAKey(PKey):
    """
    Representation of a DSA key which can be used to sign and verify
    message digests.

    A key is built once, either from its numbers (`from_intermediate`, or the
    constructor) or by `generate`, and never changes afterwards.  It is
    private if and only if it holds ``x``.
    """

    name = "dsa"

    # Digest sizes handed to the backend, keyed on the byte length of q.
    HASHES = {20: hashes.SHA1, 28: hashes.SHA224, 32: hashes.SHA256}

    def __init__(self, vals, x=None):
        """
        :param tuple vals: the public numbers ``(p, q, g, y)`` as `int`
        :param int x: the private value, or ``None`` for a public key
        """
        self.p, self.q, self.g, self.y = vals
        self.x = x
        self.size = self.p.bit_length()

    @property
    def is_private(self):
        return self.x is not None

    @property
    def _fields(self):
        return (self.is_private, self.p, self.q, self.g, self.y, self.x)

    def __repr__(self):
        kind = "private" if self.is_private else "public"
        return f"DSAKey(bits={self.size}, {kind})"

    def get_bits(self):
        return self.size

    def can_sign(self):
        return self.is_private

    def equals(self, other):
        """
        Return ``True`` if ``other`` is a key with the same numbers and the
        same privacy.  Numbers compare by value, so differently padded
        encodings of one key are equal.
        """
        return self == other

    def public_key(self):
        """
        Return a public-only copy of this key.
        """
        return DSAKey(vals=(self.p, self.q, self.g, self.y))

    @classmethod
    def from_intermediate(cls, key, private=False):
        """
        Create a key from the byte-encoded components in ``key``.

        :param .DSAIntermediateKey key: big-endian components
        :param bool private:
            whether to load ``x`` too; if ``False`` the result is a public
            key whether or not ``key`` carries ``x``
        :return: a new `.DSAKey`

        :raises: `.KeyMaterialInvalid` -- if a needed component is missing,
            empty or not bytes
        """
        vals = tuple(_to_int(key, field) for field in ("p", "q", "g", "y"))
        if not private:
            return cls(vals=vals)
        return cls(vals=vals, x=_to_int(key, "x"))

    @staticmethod
    def generate(bits=DEFAULT_BITS):
        """
        Generate a new private DSA key: fresh domain parameters of the
        requested size, then a key pair on them.  This is slow for large
        sizes and cannot be interrupted.

        :param int bits: number of bits of ``p``
        :return: new `.DSAKey` private key

        :raises: `.ParameterGenerationFailed`
        :raises: `.KeyPairGenerationFailed`
        """
        if bits not in VALID_BITS:
            raise ParameterGenerationFailed(
                bits, f"key size must be one of {VALID_BITS}"
            )
        _log.log(DEBUG, "Generating %d-bit DSA parameters", bits)
        try:
            params = dsa.generate_parameters(bits, backend=default_backend())
        except (ValueError, UnsupportedAlgorithm) as e:
            _log.log(DEBUG, "Parameter generation failed: %s", e)
            raise ParameterGenerationFailed(bits, str(e)) from e
        try:
            numbers = params.generate_private_key().private_numbers()
        except (ValueError, UnsupportedAlgorithm) as e:
            _log.log(DEBUG, "Key pair generation failed: %s", e)
            raise KeyPairGenerationFailed(bits, str(e)) from e
        _log.log(DEBUG, "Generated %d-bit DSA key", bits)
        pn = numbers.public_numbers.parameter_numbers
        return DSAKey(
            vals=(pn.p, pn.q, pn.g, numbers.public_numbers.y), x=numbers.x
        )

    def get_public_attributes(self):
        """
        Return the public numbers as a `.DSAIntermediateKey` with ``x``
        unset.  Each field is the shortest big-endian encoding of its
        number.

        :raises: `.KeyMaterialMissing`
        """
        fields = {}
        for field in ("p", "q", "g", "y"):
            value = getattr(self, field, None)
            if value is None:
                raise KeyMaterialMissing(field)
            fields[field] = util.deflate_long(value)
        return DSAIntermediateKey(**fields)

    def get_attributes(self):
        """
        Return all five numbers as a `.DSAIntermediateKey`.

        :raises: `.NotAPrivateKey` -- if this is a public key
        """
        if not self.is_private:
            raise NotAPrivateKey("exporting private attributes")
        key = self.get_public_attributes()
        key.x = util.deflate_long(self.x)
        return key

    def _parameter_numbers(self):
        return dsa.DSAParameterNumbers(p=self.p, q=self.q, g=self.g)

    def _public_numbers(self):
        return dsa.DSAPublicNumbers(
            y=self.y, parameter_numbers=self._parameter_numbers()
        )

    def _private_key(self):
        return dsa.DSAPrivateNumbers(
            x=self.x, public_numbers=self._public_numbers()
        ).private_key(backend=default_backend())

    def _public_key(self):
        return self._public_numbers().public_key(backend=default_backend())

    def _prehashed(self, message_digest):
        # DSA only uses the leftmost len(q) bytes of the digest and reads
        # them as an integer, so truncating and then left-padding with
        # zeros leaves the signed value unchanged.
        qlen = (self.q.bit_length() + 7) // 8
        hash_class = self.HASHES.get(qlen)
        if hash_class is None:
            raise ValueError(f"unsupported subgroup size: {qlen * 8} bits")
        digest = util.b(message_digest)[:qlen]
        digest = zero_byte * (qlen - len(digest)) + digest
        return digest, Prehashed(hash_class())

    def sign(self, message_digest):
        """
        Sign an already computed message digest.  The nonce is random, so
        signing the same digest twice gives two different signatures.

        :param bytes message_digest: the digest to sign, of any length
        :return: DER-encoded ``(r, s)`` signature, as `bytes`

        :raises: `.NotAPrivateKey` -- if this is a public key
        :raises: `.SigningError` -- if the backend could not sign
        """
        if not self.is_private:
            raise NotAPrivateKey("signing")
        try:
            digest, algorithm = self._prehashed(message_digest)
            return self._private_key().sign(digest, algorithm)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            _log.log(DEBUG, "DSA signing failed: %s", e)
            raise SigningError("DSA signing failed", str(e)) from e

    def check_signature(self, message_digest, signature):
        """
        Check ``signature`` over ``message_digest`` and report which of the
        three outcomes applies; see `.SignatureCheck`.

        :param bytes message_digest: the digest that was signed
        :param bytes signature: DER-encoded ``(r, s)`` signature
        :return: a `.SignatureCheck`
        """
        try:
            digest, algorithm = self._prehashed(message_digest)
            key = self._public_key()
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            _log.log(DEBUG, "DSA verification error: %s", e)
            return SignatureCheck.error(str(e))
        try:
            signature = util.b(signature)
            # The backend gives no reason for rejecting a badly encoded
            # signature, so decode it here to keep one.
            decode_dss_signature(signature)
        except (ValueError, TypeError) as e:
            _log.log(DEBUG, "Malformed DSA signature: %s", e)
            return SignatureCheck.invalid(str(e))
        try:
            key.verify(signature, digest, algorithm)
        except InvalidSignature:
            return SignatureCheck.invalid()
        return SignatureCheck.valid()

    def verify(self, message_digest, signature):
        """
        Verify a signature over an already computed message digest.

        :param bytes message_digest: the digest that was signed
        :param bytes signature: DER-encoded ``(r, s)`` signature
        :return:
            ``True`` if the signature is valid for this key; ``False`` if it
            is malformed or does not match

        :raises: `.VerificationError` -- if the key cannot be used for
            verification
        """
        result = self.check_signature(message_digest, signature)
        if result.is_error:
            raise VerificationError("DSA verification failed", result.detail)
        return result.ok

    def to_pem(self):
        try:
            if self.is_private:
                return self._private_key().private_bytes(
                    encoding=serialization.Encoding.PEM,
                    format=serialization.PrivateFormat.TraditionalOpenSSL,
                    encryption_algorithm=serialization.NoEncryption(),
                )
            return self._public_key().public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            _log.log(DEBUG, "PEM encoding failed: %s", e)
            raise PEMEncodingError("cannot encode DSA key", str(e)) from e

    @classmethod
    def from_pem(cls, data):
        """
        Create a key from unencrypted PEM data, either a private key block
        (traditional or PKCS#8) or a public key block.

        :param bytes data: PEM text
        :return: a new `.DSAKey`, private if ``data`` held a private key

        :raises: `.PEMEncodingError` -- if ``data`` is not a DSA key
        """
        data = util.b(data)
        try:
            if b"PRIVATE KEY-----" in data:
                key = serialization.load_pem_private_key(
                    data, password=None, backend=default_backend()
                )
            else:
                key = serialization.load_pem_public_key(
                    data, backend=default_backend()
                )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            _log.log(DEBUG, "PEM decoding failed: %s", e)
            raise PEMEncodingError("cannot decode PEM key", str(e)) from e

        if isinstance(key, dsa.DSAPrivateKey):
            numbers = key.private_numbers()
            public, x = numbers.public_numbers, numbers.x
        elif isinstance(key, dsa.DSAPublicKey):
            public, x = key.public_numbers(), None
        else:
            raise PEMEncodingError("not a DSA key", type(key).__name__)
        pn = public.parameter_numbers
        return cls(vals=(pn.p, pn.q, pn.g, public.y), x=x)
