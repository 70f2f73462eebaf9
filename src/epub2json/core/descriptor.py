"""Parse XML descriptors (OPF, NCX) into uniformly addressable nodes.

Every element is exposed as an ordered list of child nodes, looked up by
local name so namespaced and prefixed documents read the same way. The
``require`` helpers centralize presence checks and raise a ``SchemaError``
whose message names the full element path, e.g.::

    package.opf is missing required package.metadata.dc:title element.
"""

from lxml import etree

from epub2json.errors import SchemaError

_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
)


def _local(name: str) -> str:
    """Strip a namespace prefix ("dc:title") or Clark namespace ("{ns}title")."""
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name.split(":", 1)[-1]


def _display_name(element: etree._Element) -> str:
    local = etree.QName(element).localname
    return f"{element.prefix}:{local}" if element.prefix else local


class DescriptorNode:
    """Read-only view of one XML element."""

    def __init__(self, element: etree._Element, path: str, source: str):
        self.element = element
        self.path = path
        self.source = source

    def __repr__(self) -> str:
        return f"DescriptorNode({self.path!r})"

    @property
    def name(self) -> str:
        return etree.QName(self.element).localname

    @property
    def text(self) -> str:
        """Concatenated text content, stripped."""
        return "".join(self.element.itertext()).strip()

    def children(self, name: str | None = None) -> list["DescriptorNode"]:
        """Child elements in document order, optionally filtered by name.

        ``name`` may carry a prefix ("dc:creator"); matching uses the local
        part only.
        """
        wanted = _local(name) if name else None
        nodes = []
        for child in self.element:
            if not isinstance(child.tag, str):
                continue
            if wanted is not None and etree.QName(child).localname != wanted:
                continue
            label = name if name else _display_name(child)
            nodes.append(DescriptorNode(child, f"{self.path}.{label}", self.source))
        return nodes

    def first(self, name: str) -> "DescriptorNode | None":
        found = self.children(name)
        return found[0] if found else None

    def attr(self, name: str) -> str | None:
        """Attribute value by name, ignoring any namespace on the attribute."""
        value = self.element.get(name)
        if value is not None:
            return value
        wanted = _local(name)
        for key, value in self.element.attrib.items():
            if _local(key) == wanted:
                return value
        return None

    def missing(self, name: str) -> SchemaError:
        """Error for a required child element that is absent."""
        path = f"{self.path}.{name}"
        return SchemaError(
            f"{self.source} is missing required {path} element.", path=path
        )

    def require(self, name: str) -> list["DescriptorNode"]:
        """Children with the given name; at least one must exist."""
        found = self.children(name)
        if not found:
            raise self.missing(name)
        return found

    def require_first(self, name: str) -> "DescriptorNode":
        return self.require(name)[0]

    def require_attr(self, name: str) -> str:
        value = self.attr(name)
        if value is None:
            path = f"{self.path}@{name}"
            raise SchemaError(
                f"{self.source} is missing required {path} attribute.", path=path
            )
        return value


def parse_descriptor(data: bytes, source: str, root: str) -> DescriptorNode:
    """Parse XML bytes and check the root element name.

    Args:
        data: Raw XML document
        source: Document label used in diagnostics ("package.opf")
        root: Required local name of the root element ("package")

    Raises:
        SchemaError: If the XML is malformed or the root element differs
    """
    try:
        element = etree.fromstring(data, _PARSER)
    except etree.XMLSyntaxError as e:
        raise SchemaError(f"{source} is not well-formed XML: {e}") from e

    if etree.QName(element).localname != root:
        raise SchemaError(
            f"{source} is missing required {root} element.", path=root
        )
    return DescriptorNode(element, root, source)
