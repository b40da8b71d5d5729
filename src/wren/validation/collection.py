"""Error collection — the per-request accumulator of field errors.

Create one per submission, pass it to every validator, read it once::

    errors = ErrorCollection()
    name = required_string(form, "name", "Name", maxlength=50, errors=errors)
    age = optional_int(form, "age", "Age", maxlength=3, min_value=0,
                       max_value=130, errors=errors)
    if errors:
        ...  # re-present the form

Validators also accept a plain ``dict`` as the sink.
"""

from collections.abc import Iterator, Mapping, MutableMapping


class ErrorCollection(Mapping[str, str]):
    """Field name → error message, one message per field.

    Read-only through the ``Mapping`` interface. Entries are only added
    through ``record()`` and ``merge()``; nothing is ever removed.
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: Mapping[str, str] | None = None) -> None:
        self._errors: dict[str, str] = dict(errors or {})

    def record(self, name: str, message: str) -> None:
        """Record *message* for *name*, replacing any earlier message."""
        self._errors[name] = message

    def merge(self, other: Mapping[str, str]) -> None:
        """Record every entry of *other*."""
        for name, message in other.items():
            self.record(name, message)

    def __getitem__(self, key: str) -> str:
        return self._errors[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ErrorCollection({self._errors!r})"


type ErrorSink = ErrorCollection | MutableMapping[str, str]


def record_error(errors: ErrorSink, name: str, message: str) -> None:
    """Write one error into either kind of sink."""
    if isinstance(errors, ErrorCollection):
        errors.record(name, message)
    else:
        errors[name] = message
