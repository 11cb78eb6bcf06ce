"""Document-level PDF objects: catalog, encryption, RGB data and graphics states."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

Encryptor = Callable[[bytes], bytes]


@dataclass
class CatalogObj:
    """The document catalog, pointing at the page tree and the outlines."""

    outlines_obj_id: int = -1

    def set_outlines_index(self, index: int) -> None:
        """Point the catalog at the outlines object stored at ``index``."""
        self.outlines_obj_id = index + 1

    def write(self) -> str:
        parts = ["<<\n", "  /Type /Catalog\n", "  /Pages 2 0 R\n"]
        if self.outlines_obj_id >= 0:
            parts.append("  /PageMode /UseOutlines\n")
            parts.append(f"  /Outlines {self.outlines_obj_id} 0 R\n")
        parts.append(">>\n")
        return "".join(parts)


def _escape(value: bytes) -> bytes:
    return (
        value.replace(b"\\", b"\\\\")
        .replace(b"(", b"\\(")
        .replace(b")", b"\\)")
        .replace(b"\r", b"\\r")
    )


@dataclass
class EncryptionObj:
    """The standard security handler dictionary (revision 2)."""

    u_value: bytes = b""
    o_value: bytes = b""
    p_value: int = 0

    def write(self) -> bytes:
        return (
            b"<<\n/Filter /Standard\n/V 1\n/R 2\n"
            + b"/O (" + _escape(self.o_value) + b")\n"
            + b"/U (" + _escape(self.u_value) + b")\n"
            + f"/P {self.p_value}\n".encode("ascii")
            + b">>\n"
        )


@dataclass
class DeviceRGBObj:
    """A raw stream of RGB data, optionally encrypted."""

    data: bytes = b""
    encryptor: Optional[Encryptor] = None

    def write(self) -> bytes:
        out = f"<<\n/Length {len(self.data)}\n>>\nstream\n".encode("ascii")
        if self.encryptor is not None:
            out += self.encryptor(self.data) + b"\n"
        else:
            out += self.data
        return out + b"endstream\n"


@dataclass(frozen=True)
class ExtGStateOptions:
    """Parameters of an extended graphics state."""

    stroking_ca: Optional[float] = None
    non_stroking_ca: Optional[float] = None
    blend_mode: Optional[str] = None
    smask_index: Optional[int] = None

    def key(self) -> str:
        """An identifier that is equal for equal parameter sets."""
        parts = []
        if self.stroking_ca is not None:
            parts.append(f"CA_{self.stroking_ca:.3f};")
        if self.non_stroking_ca is not None:
            parts.append(f"ca_{self.non_stroking_ca:.3f};")
        if self.blend_mode is not None:
            parts.append(f"BM_{self.blend_mode};")
        if self.smask_index is not None:
            parts.append(f"SMask_{self.smask_index}_0_R;")
        return "".join(parts)


@dataclass
class ExtGState:
    """An ExtGState dictionary object."""

    index: int = 0
    non_stroking_ca: Optional[float] = None
    stroking_ca: Optional[float] = None
    blend_mode: Optional[str] = None
    smask_index: Optional[int] = None

    @classmethod
    def from_options(cls, options: ExtGStateOptions, index: int = 0) -> ExtGState:
        return cls(
            index=index,
            non_stroking_ca=options.non_stroking_ca,
            stroking_ca=options.stroking_ca,
            blend_mode=options.blend_mode,
            smask_index=options.smask_index,
        )

    def write(self) -> str:
        parts = ["<<\n", "\t/Type /ExtGState\n"]
        if self.non_stroking_ca is not None:
            parts.append(f"\t/ca {self.non_stroking_ca:.3f}\n")
        if self.stroking_ca is not None:
            parts.append(f"\t/CA {self.stroking_ca:.3f}\n")
        if self.blend_mode is not None:
            parts.append(f"\t/BM {self.blend_mode}\n")
        if self.smask_index is not None:
            parts.append(f"\t/SMask {self.smask_index + 1} 0 R\n")
        parts.append(">>\n")
        return "".join(parts)


@dataclass
class ExtGStatesMap:
    """A thread-safe cache of graphics states keyed by their options."""

    _table: Dict[str, ExtGState] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def find(self, options: ExtGStateOptions) -> Optional[ExtGState]:
        """Return the cached state for ``options``, or ``None``."""
        with self._lock:
            return self._table.get(options.key())

    def save(self, key: str, state: ExtGState) -> ExtGState:
        """Store ``state`` under ``key`` and return it."""
        with self._lock:
            self._table[key] = state
        return state

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)