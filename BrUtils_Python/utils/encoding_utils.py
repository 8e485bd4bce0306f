import base64
from typing import Any, Dict, Optional

from jose import jwt
from jose.exceptions import JOSEError


class EncodingUtils:
    """Utilities for base64 strings and JSON Web Tokens."""

    @staticmethod
    def base64_decode(encoded: str) -> str:
        """
        Decode a base64 string into UTF-8 text.

        Both the standard and the URL-safe alphabets are accepted, padding is optional.
        Raises ValueError (binascii.Error or UnicodeDecodeError) on invalid input.
        """
        data = encoded.strip().replace("-", "+").replace("_", "/")
        data += "=" * (-len(data) % 4)
        return base64.b64decode(data, validate=True).decode("utf-8")

    @staticmethod
    def jwt_payload(token: Any) -> Optional[Dict[str, Any]]:
        """Unverified claims of a JWT, or None when the token cannot be decoded."""
        if not isinstance(token, str) or len(token.split(".")) != 3:
            return None
        try:
            return jwt.get_unverified_claims(token)
        except JOSEError:
            return None

    @staticmethod
    def jwt_check(token: Any) -> bool:
        """
        Structural JWT check: three segments, header and payload are non-empty
        JSON objects and the signature segment is present. The signature itself
        is not verified.
        """
        if not token or not isinstance(token, str):
            return False
        parts = token.split(".")
        if len(parts) != 3 or not parts[2]:
            return False
        try:
            header = jwt.get_unverified_header(token)
            payload = jwt.get_unverified_claims(token)
        except JOSEError:
            return False
        return bool(header) and bool(payload)
