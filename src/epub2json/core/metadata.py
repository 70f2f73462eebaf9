"""Extract Dublin-Core metadata from the OPF."""

from epub2json.core.descriptor import DescriptorNode
from epub2json.models.package import Metadata

# Metadata field -> Dublin-Core element, read from the first occurrence
SCALAR_FIELDS = {
    "title": "dc:title",
    "publisher": "dc:publisher",
    "date": "dc:date",
    "identifier": "dc:identifier",
    "language": "dc:language",
    "description": "dc:description",
    "rights": "dc:rights",
    "source": "dc:source",
    "type": "dc:type",
}


def extract_metadata(metadata: DescriptorNode) -> Metadata:
    """Read the fixed set of metadata fields.

    Raises:
        SchemaError: Naming the first required element that is absent
    """
    values = {
        field: metadata.require_first(element).text
        for field, element in SCALAR_FIELDS.items()
    }
    creators = [creator.text for creator in metadata.require("dc:creator")]
    return Metadata(creators=creators, **values)
