"""Persisted display preference backed by diskcache.

The user's chosen odds notation survives across sessions. The formatter
never reads this store; callers read the notation once per render and pass
it to odds_engine.display.formatters.

Cache directory structure:
    .cache/odds_engine/
        cache.db

Example:
    store = PreferenceStore()
    store.set_notation("fractional")
    notation = store.get_notation()   # OddsNotation.FRACTIONAL
    text = format_odds(2.5, notation)  # "3/2"
"""

from diskcache import Cache

from odds_engine.conversion.models import OddsNotation
from odds_engine.monitoring import get_logger

logger = get_logger(__name__)

# Key the notation is stored under
ODDS_FORMAT_KEY = "odds_format"


class PreferenceStore:
    """Disk-persisted key-value store for the display notation.

    Attributes:
        default_notation: Returned when nothing valid is stored
    """

    def __init__(
        self,
        directory: str = ".cache/odds_engine",
        default_notation: OddsNotation | str = OddsNotation.DECIMAL,
    ):
        """Open (or create) the store.

        Args:
            directory: Directory for the cache database
            default_notation: Notation used when the preference is unset

        Raises:
            ValueError: If default_notation is not a known notation
        """
        self.default_notation = OddsNotation.coerce(default_notation)
        self._cache = Cache(directory=directory)

    def get_notation(self) -> OddsNotation:
        """Read the stored notation.

        Returns:
            Stored OddsNotation, or default_notation when unset or unreadable
        """
        stored = self._cache.get(ODDS_FORMAT_KEY, default=None)
        if stored is None:
            return self.default_notation
        try:
            return OddsNotation.coerce(stored)
        except ValueError:
            logger.warning("preference_invalid", key=ODDS_FORMAT_KEY, stored=repr(stored))
            return self.default_notation

    def set_notation(self, notation: OddsNotation | str) -> OddsNotation:
        """Validate and persist the notation.

        Returns:
            The stored OddsNotation

        Raises:
            ValueError: If notation is not a known notation
        """
        notation = OddsNotation.coerce(notation)
        self._cache.set(ODDS_FORMAT_KEY, notation.value)
        logger.info("preference_updated", key=ODDS_FORMAT_KEY, notation=notation.value)
        return notation

    def clear(self) -> None:
        """Remove the stored notation so the default applies again."""
        self._cache.delete(ODDS_FORMAT_KEY)
        logger.info("preference_cleared", key=ODDS_FORMAT_KEY)

    def close(self) -> None:
        """Close the underlying cache database."""
        self._cache.close()

    def __enter__(self) -> "PreferenceStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
