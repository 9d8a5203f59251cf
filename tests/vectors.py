# RFC 4226 / RFC 6238 test keys, Base32 encoded
RFC_SECRET_SHA1 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"  # "12345678901234567890"
RFC_SECRET_SHA256 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQGEZA"
RFC_SECRET_SHA512 = "GEZDGNBVGY3TQOJQ" * 6 + "GEZDGNA"
