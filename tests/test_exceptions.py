import pickle
import unittest

from dsakeys import (
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


class ExceptionTest(unittest.TestCase):
    def test_hierarchy(self):
        for cls in (KeyMaterialInvalid, KeyMaterialMissing, NotAPrivateKey):
            self.assertTrue(issubclass(cls, KeyMaterialError))
        for cls in (
            KeyMaterialError,
            ParameterGenerationFailed,
            KeyPairGenerationFailed,
            SigningError,
            VerificationError,
            FileOpenError,
            PEMEncodingError,
        ):
            self.assertTrue(issubclass(cls, KeyException))
        self.assertTrue(issubclass(KeyException, Exception))

    def test_str_includes_detail(self):
        e = KeyMaterialInvalid("p", "empty byte string")
        self.assertEqual(str(e), "invalid key component 'p' (empty byte string)")
        self.assertEqual(e.field, "p")
        self.assertEqual(e.detail, "empty byte string")

    def test_str_without_detail(self):
        self.assertEqual(
            str(KeyMaterialMissing("y")), "missing key component 'y'"
        )
        self.assertEqual(str(NotAPrivateKey("signing")), "signing requires a private key")
        self.assertIsNone(SigningError("DSA signing failed").detail)

    def test_generation_errors_keep_size(self):
        e = ParameterGenerationFailed(1000, "bad size")
        self.assertEqual(e.bits, 1000)
        self.assertIn("1000-bit", str(e))
        self.assertEqual(KeyPairGenerationFailed(2048).bits, 2048)

    def test_file_open_error(self):
        e = FileOpenError("/no/such/file", "No such file or directory")
        self.assertEqual(e.path, "/no/such/file")
        self.assertIn("/no/such/file", str(e))

    def test_plain_errors_pickle(self):
        e = pickle.loads(pickle.dumps(VerificationError("failed", "bad DER")))
        self.assertEqual(str(e), "failed (bad DER)")
