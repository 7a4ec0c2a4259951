from exhibitions.stores.interfaces import (
    ArDesignStore,
    ExhibitionInformationStore,
    ExhibitionStore,
    ExhibitorStore,
)

__all__ = [
    "ArDesignStore",
    "ExhibitionInformationStore",
    "ExhibitionStore",
    "ExhibitorStore",
]
