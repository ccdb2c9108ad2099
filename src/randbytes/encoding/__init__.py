"""Output encoding subsystem for randbytes.

Importing this package registers every built-in codec::

    from randbytes.encoding import encode
    encode(b"\\x00\\xff", OutputFormat.HEX_UPPER).data  # b"00FF"
"""

from randbytes.encoding.b64 import Base64Codec, URLBase64Codec
from randbytes.encoding.base import Codec, EncodedOutput
from randbytes.encoding.hexadecimal import HexLowerCodec, HexUpperCodec
from randbytes.encoding.raw import RawCodec
from randbytes.encoding.registry import CodecRegistry, encode, register_codec
from randbytes.encoding.urlencoded import URLEncodedCodec

__all__ = [
    "Base64Codec",
    "Codec",
    "CodecRegistry",
    "EncodedOutput",
    "HexLowerCodec",
    "HexUpperCodec",
    "RawCodec",
    "URLBase64Codec",
    "URLEncodedCodec",
    "encode",
    "register_codec",
]
