import json
from dataclasses import dataclass, field
from .errors import MalformedWireFormat

# -----------------------------
# Wire Helpers
# -----------------------------
def _parse_int(raw: str, name: str) -> int:
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        raise MalformedWireFormat(f"Field {name} is not a non-negative integer: {raw!r}", field=name)
    return int(raw)

def strip_trailing_newline(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text

@dataclass
class RsaWire:
    """<N>;<E>;<fixed-width chunks, no separators>"""
    n: int
    e: int
    chunks: str = ""

    def format(self) -> str:
        return f"{self.n};{self.e};{self.chunks}"

    def split_chunks(self, width: int) -> list[int]:
        if width < 1 or len(self.chunks) % width:
            raise MalformedWireFormat(
                f"Chunk blob of length {len(self.chunks)} is not a multiple of chunk width {width}",
                field="chunks",
            )
        return [int(self.chunks[i:i + width]) for i in range(0, len(self.chunks), width)]

    @classmethod
    def parse(cls, text: str) -> "RsaWire":
        parts = strip_trailing_newline(text).split(";")
        if len(parts) != 3:
            raise MalformedWireFormat(f"Expected 3 ';'-separated fields, got {len(parts)}", field="message")
        n = _parse_int(parts[0], "N")
        e = _parse_int(parts[1], "E")
        chunks = parts[2].strip()
        if chunks and not (chunks.isascii() and chunks.isdigit()):
            raise MalformedWireFormat(f"Chunk blob contains non-digit characters: {chunks!r}", field="chunks")
        return cls(n=n, e=e, chunks=chunks)

@dataclass
class BagWire:
    """<E>;<seq_0>;...;<seq_k-1>;<sum_1>;...;<sum_m>"""
    e: int
    public_sequence: list[int]
    sums: list[int] = field(default_factory=list)

    def format(self) -> str:
        return ";".join(str(x) for x in [self.e, *self.public_sequence]) + ";" + ";".join(str(s) for s in self.sums)

    @classmethod
    def parse(cls, text: str, sequence_len: int) -> "BagWire":
        parts = strip_trailing_newline(text).split(";")
        if parts and parts[-1].strip() == "":
            parts = parts[:-1]  # older encoders ended every sum with ';'
        if len(parts) < sequence_len + 1:
            raise MalformedWireFormat(
                f"Expected at least {sequence_len + 1} fields (E and {sequence_len} sequence terms), got {len(parts)}",
                field="message",
            )
        e = _parse_int(parts[0], "E")
        seq = [_parse_int(raw, f"seq[{j}]") for j, raw in enumerate(parts[1:sequence_len + 1])]
        sums = [_parse_int(raw, f"sum[{i}]") for i, raw in enumerate(parts[sequence_len + 1:])]
        return cls(e=e, public_sequence=seq, sums=sums)

# -----------------------------
# Key Files
# -----------------------------
def write_key_json(path: str, data: dict):
    with open(path, "w") as f:
        json.dump(data, f)

def read_key_json(path: str) -> dict:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Key file {path} must hold a JSON object, got {type(data).__name__}")
    return data
