"""Pydantic data models for the byte codec."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bytecodec.utils.encoding import (
    BytesLike,
    is_empty,
    to_base64,
    to_hex,
    to_str,
)


class EncodedBytes(BaseModel):
    """All textual representations of a single byte sequence."""

    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=0, description="Number of bytes")
    empty: bool = Field(..., description="True for None or zero-length input")
    text: str = Field("", description="UTF-8 decoding (replacement on error)")
    hex: str = Field("", pattern=r"^[0-9a-f]*$", description="Lowercase hex")
    base64: str = Field("", description="Standard padded Base64")

    @classmethod
    def from_bytes(cls, data: Optional[BytesLike]) -> "EncodedBytes":
        """
        Encode data every supported way.

        Args:
            data: Bytes-like object or None

        Returns:
            EncodedBytes: Validated, immutable model
        """
        encoded = to_hex(data)
        return cls(
            length=len(encoded) // 2,
            empty=is_empty(data),
            text=to_str(data),
            hex=encoded,
            base64=to_base64(data),
        )
