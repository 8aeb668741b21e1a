"""Value model shared by the JSON and MessagePack codecs."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple, Union


class ValueKind(Enum):
    """Closed set of shapes a JSON-expressible value can take."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


Number = Union[int, float]


@dataclass(frozen=True)
class Value:
    """
    Tagged union over the JSON value shapes.

    ``data`` holds ``None`` for NULL, a ``bool``, an ``int``/``float``, a ``str``,
    a tuple of ``Value`` for SEQUENCE, or a tuple of ``(str, Value)`` pairs for
    MAPPING. Container payloads are tuples so a Value graph is never shared
    or mutated after construction.
    """

    kind: ValueKind
    data: Any = None

    def __post_init__(self):
        """Validate payload against the tag."""
        self._validate()

    def _validate(self) -> None:
        kind, data = self.kind, self.data

        if kind is ValueKind.NULL:
            if data is not None:
                raise ValueError("null value cannot carry data")
        elif kind is ValueKind.BOOLEAN:
            if not isinstance(data, bool):
                raise ValueError("boolean value requires a bool")
        elif kind is ValueKind.NUMBER:
            if isinstance(data, bool) or not isinstance(data, (int, float)):
                raise ValueError("number value requires an int or float")
        elif kind is ValueKind.STRING:
            if not isinstance(data, str):
                raise ValueError("string value requires a str")
        elif kind is ValueKind.SEQUENCE:
            if not isinstance(data, tuple):
                raise ValueError("sequence value requires a tuple of values")
        elif kind is ValueKind.MAPPING:
            if not isinstance(data, tuple):
                raise ValueError("mapping value requires a tuple of pairs")
            keys = [key for key, _ in data]
            if len(set(keys)) != len(keys):
                raise ValueError("mapping keys must be unique")

    # Constructors

    @classmethod
    def null(cls) -> 'Value':
        return cls(ValueKind.NULL)

    @classmethod
    def boolean(cls, flag: bool) -> 'Value':
        return cls(ValueKind.BOOLEAN, flag)

    @classmethod
    def number(cls, number: Number) -> 'Value':
        return cls(ValueKind.NUMBER, number)

    @classmethod
    def string(cls, text: str) -> 'Value':
        return cls(ValueKind.STRING, text)

    @classmethod
    def sequence(cls, items: Iterable['Value']) -> 'Value':
        return cls(ValueKind.SEQUENCE, tuple(items))

    @classmethod
    def mapping(cls, pairs: Iterable[Tuple[str, 'Value']],
                sort_keys: bool = True) -> 'Value':
        """
        Build a mapping from key/value pairs.

        A repeated key keeps the last value written for it. With ``sort_keys``
        the pairs are stored in ascending key order, otherwise in the order
        each key was first seen.

        Args:
            pairs: Iterable of (key, Value) pairs
            sort_keys: Whether to store keys sorted

        Returns:
            Mapping Value
        """
        entries = {}
        for key, item in pairs:
            if not isinstance(key, str):
                raise TypeError(f"mapping keys must be str, got {type(key).__name__}")
            entries[key] = item

        ordered = sorted(entries.items()) if sort_keys else entries.items()
        return cls(ValueKind.MAPPING, tuple(ordered))

    @classmethod
    def from_python(cls, obj: Any, sort_keys: bool = True) -> 'Value':
        """
        Build a Value from plain Python data.

        Args:
            obj: None, bool, int, float, str, list, tuple or dict with str keys
            sort_keys: Whether mappings store keys sorted

        Returns:
            Value mirroring ``obj``

        Raises:
            TypeError: If ``obj`` contains anything JSON cannot express
        """
        if obj is None:
            return cls.null()
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, (int, float)):
            return cls.number(obj)
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, (list, tuple)):
            return cls.sequence(cls.from_python(item, sort_keys) for item in obj)
        if isinstance(obj, dict):
            return cls.mapping(
                ((key, cls.from_python(item, sort_keys)) for key, item in obj.items()),
                sort_keys=sort_keys
            )
        raise TypeError(f"cannot represent {type(obj).__name__} as a JSON value")

    def to_python(self) -> Any:
        """Convert back to plain Python data, dicts in stored key order."""
        if self.kind is ValueKind.SEQUENCE:
            return [item.to_python() for item in self.data]
        if self.kind is ValueKind.MAPPING:
            return {key: item.to_python() for key, item in self.data}
        return self.data

    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def is_container(self) -> bool:
        return self.kind in (ValueKind.SEQUENCE, ValueKind.MAPPING)

    def keys(self) -> Tuple[str, ...]:
        """Keys of a mapping in stored order."""
        if self.kind is not ValueKind.MAPPING:
            raise TypeError(f"{self.kind.value} value has no keys")
        return tuple(key for key, _ in self.data)

    def get(self, key: str) -> 'Value':
        """Look up a mapping entry by key."""
        if self.kind is not ValueKind.MAPPING:
            raise TypeError(f"{self.kind.value} value has no keys")
        for name, item in self.data:
            if name == key:
                return item
        raise KeyError(key)

    def describe(self) -> str:
        """Short human-readable summary, used in log lines."""
        if self.kind is ValueKind.MAPPING:
            return f"mapping with {len(self.data)} keys"
        elif self.kind is ValueKind.SEQUENCE:
            return f"sequence with {len(self.data)} items"
        elif self.kind is ValueKind.STRING:
            return f"string of {len(self.data)} chars"
        return self.kind.value
