"""
Upload envelope for transcripts delivered over a transport.

Upload handlers receive chat exports as base64 text alongside the original
filename. Decoding is owned here, outside the extraction pipeline.
"""

import base64
import binascii

from pydantic import BaseModel, Field

from ..errors import ValidationError, wrap_decode_error


class TranscriptUpload(BaseModel):
    """A chat export as delivered by an upload handler."""

    filename: str = Field(..., min_length=1, description='Original export filename')
    content: str = Field(..., description='Base64 encoded transcript bytes')

    def decode_bytes(self) -> bytes:
        """Decode the base64 payload into raw bytes."""
        try:
            return base64.b64decode(self.content, validate=True)
        except (binascii.Error, ValueError) as e:
            raise wrap_decode_error(e, context={'filename': self.filename}) from e

    def decode_text(self) -> str:
        """
        Decode the payload into transcript text.

        Exports from some phones carry a UTF-8 byte order mark, which is dropped.

        Raises:
            DecodeError: If the payload is not base64 or not UTF-8
            ValidationError: If the payload decodes to nothing
        """
        raw = self.decode_bytes()
        if not raw:
            raise ValidationError(
                "Uploaded transcript is empty",
                context={'filename': self.filename},
            )
        try:
            return raw.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise wrap_decode_error(e, context={'filename': self.filename}) from e

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'filename': 'WhatsApp Chat with Dealers.txt',
                    'content': 'MDEvMTIvMjAyMywgMTA6MzAgLSBKb2huIERvZTogSGVsbG8=',
                }
            ]
        }
    }
