"""
Base needle classes.

Provides the Needle capability shared by every matcher kind and the pydantic
base model that the concrete needles build on.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import BaseModel

from ..constants import NeedleKind
from ..exceptions import UnsupportedNeedleError


class Needle(ABC):
    """
    Capability of deciding whether a candidate string is a match.

    Implementations must be pure: the answer depends only on the needle's own
    state and the candidate, and asking never fails. Anything that can be
    rejected (an invalid regex, a non-callable predicate) is rejected when the
    needle is built.
    """

    @abstractmethod
    def is_match(self, candidate: str) -> bool:
        """
        Test a single candidate string.

        Args:
            candidate: The haystack string to test

        Returns:
            True if the candidate satisfies this needle
        """
        pass

    def is_match_in(self, candidates: Iterable[str]) -> bool:
        """
        Test whether any of the candidates is a match.

        Candidates are pulled from the iterable one at a time and nothing
        after the first match is consumed, so lazily produced candidates are
        only computed as far as needed.

        Args:
            candidates: Iterable of haystack strings

        Returns:
            True if at least one candidate matches, False for an empty iterable
        """
        return any(self.is_match(candidate) for candidate in candidates)


class NeedleModel(BaseModel, Needle):
    """
    Base class for needles that carry pydantic-validated configuration.

    Instances are frozen, so configuration methods hand back new instances and
    equality and hashing are structural over the declared fields.
    """

    model_config: ClassVar[dict[str, Any]] = {'frozen': True, 'extra': 'forbid'}

    @property
    def kind(self) -> NeedleKind | str:
        """Return the kind this class is registered under (plain str for custom kinds)."""
        # Import here to avoid circular import
        from ..registry import get_kind_for_class  # noqa: PLC0415
        kind_str = get_kind_for_class(self.__class__)
        if kind_str in NeedleKind._value2member_map_:
            return NeedleKind(kind_str)
        return kind_str

    @classmethod
    def from_value(cls, value: Any) -> 'NeedleModel':  # noqa: ANN401
        """
        Wrap a raw source value (string, pattern, callable) in this needle class.

        Raises:
            UnsupportedNeedleError: If the class does not adapt raw values
        """
        raise UnsupportedNeedleError(
            f"{cls.__name__} cannot be built from a raw value",
            value_type=type(value),
        )
