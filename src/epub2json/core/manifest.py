"""Index the OPF manifest by item id."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from epub2json.core.descriptor import DescriptorNode
from epub2json.errors import MissingReferenceError, SchemaError
from epub2json.models.package import ManifestEntry


class ManifestIndex(Mapping[str, ManifestEntry]):
    """Immutable id -> ManifestEntry mapping in declaration order."""

    def __init__(self, entries: dict[str, ManifestEntry]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_manifest(cls, manifest: DescriptorNode) -> "ManifestIndex":
        """Build the index from the package.manifest node.

        Raises:
            SchemaError: If an item lacks id, href or media-type, or if two
                items share an id
        """
        entries: dict[str, ManifestEntry] = {}
        for item in manifest.children("item"):
            entry = ManifestEntry(
                id=item.require_attr("id"),
                href=item.require_attr("href"),
                media_type=item.require_attr("media-type"),
            )
            if entry.id in entries:
                raise SchemaError(
                    f"{manifest.source} has duplicate {item.path} id '{entry.id}'.",
                    path=item.path,
                )
            entries[entry.id] = entry
        return cls(entries)

    def __getitem__(self, item_id: str) -> ManifestEntry:
        return self._entries[item_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, item_id: str, referrer: str) -> ManifestEntry:
        """Look up an id referenced from elsewhere in the package.

        Raises:
            MissingReferenceError: If no manifest item has that id
        """
        entry = self._entries.get(item_id)
        if entry is None:
            raise MissingReferenceError(
                f"{referrer} references '{item_id}', which is not in the manifest."
            )
        return entry
