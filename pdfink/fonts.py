"""Font-related PDF objects for simple TrueType fonts."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple, Union

Encryptor = Callable[[bytes], bytes]


def font_widths_to_str(widths: Mapping[int, int]) -> str:
    """Render the widths of character codes 32 to 255, space separated.

    Codes missing from ``widths`` count as zero.
    """
    return " " + "".join(f"{widths.get(code, 0)} " for code in range(32, 256))


@dataclass
class FontObj:
    """A simple TrueType font dictionary."""

    family: str
    font_name: Optional[str] = None
    is_embed_font: bool = False
    index_obj_width: int = 0
    index_obj_font_descriptor: int = 0
    index_obj_encoding: int = 0

    def write(self) -> str:
        base_font = self.font_name if self.font_name is not None else self.family
        parts = [
            "<<\n",
            "  /Type /Font\n",
            "  /Subtype /TrueType\n",
            f"  /BaseFont /{base_font}\n",
        ]
        if self.is_embed_font:
            parts.append("  /FirstChar 32 /LastChar 255\n")
            parts.append(f"  /Widths {self.index_obj_width} 0 R\n")
            parts.append(f"  /FontDescriptor {self.index_obj_font_descriptor} 0 R\n")
            parts.append(f"  /Encoding {self.index_obj_encoding} 0 R\n")
        parts.append(">>\n")
        return "".join(parts)


@dataclass
class EncodingObj:
    """A WinAnsi-based encoding with a differences array."""

    differences: str = ""

    def write(self) -> str:
        return (
            "<</Type /Encoding /BaseEncoding /WinAnsiEncoding /Differences ["
            + self.differences
            + "]>>\n"
        )


@dataclass
class FontDescriptorObj:
    """A font descriptor referring to an embedded TrueType font file."""

    font_name: str
    descriptors: List[Tuple[str, str]] = field(default_factory=list)
    font_file_obj_relate: str = ""

    def write(self) -> str:
        parts = [f"<</Type /FontDescriptor /FontName /{self.font_name} "]
        parts.extend(f"/{key} {value} " for key, value in self.descriptors)
        parts.append("/FontFile2 ")
        parts.append(self.font_file_obj_relate)
        parts.append(">>\n")
        return "".join(parts)


@dataclass
class EmbedFontObj:
    """A compressed font program read from a file and embedded as a stream."""

    zfont_path: Union[str, Path]
    original_size: int = 0
    encryptor: Optional[Encryptor] = None

    def write(self) -> bytes:
        """Read the font file and return the stream object; raises ``OSError``."""
        data = Path(self.zfont_path).read_bytes()
        out = (
            f"<</Length {len(data)}\n/Filter /FlateDecode\n"
            f"/Length1 {self.original_size}\n>>\nstream\n"
        ).encode("ascii")
        if self.encryptor is not None:
            out += self.encryptor(data) + b"\n"
        else:
            out += data
        return out + b"\nendstream\n"