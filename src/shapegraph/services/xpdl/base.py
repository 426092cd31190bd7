"""
Base classes for XPDL adapters.

Each adapter is a plain record of string fields with a hand-written pair of
functions: one reads the fields from the editor's JSON model element, the
other writes them as XML attributes (and reads them back). Fields are
opaque strings; no cross-field validation happens here.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from lxml import etree

from ...shared import get_settings, Point, XPDLConversionError

T = TypeVar('T', bound='XMLConvertable')


def qualify(local_name: str, namespace: Optional[str] = None) -> str:
    """Clark-notation tag for a local name in an optional namespace."""
    if namespace:
        return f"{{{namespace}}}{local_name}"
    return local_name


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def set_attribute(element: etree._Element, name: str, value: Optional[str]) -> None:
    """
    Set an attribute, leaving it out when the value is unset.

    Raises:
        XPDLConversionError: If the value holds characters XML cannot carry
    """
    if value is None:
        return
    try:
        element.set(name, value)
    except ValueError as e:
        raise XPDLConversionError(f"Cannot write {name}={value!r} on <{local_name(element)}>: {e}") from e


def format_coordinate(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def parse_coordinate(element: etree._Element, name: str) -> float:
    raw = element.get(name)
    if raw is None:
        raise XPDLConversionError(f"<{local_name(element)}> is missing the {name} attribute")
    try:
        return float(raw)
    except ValueError as e:
        raise XPDLConversionError(f"Invalid {name} value {raw!r}") from e


def child_elements(element: etree._Element, name: Optional[str] = None) -> List[etree._Element]:
    """Element children (comments skipped), optionally filtered by local name."""
    children = element.iterchildren(tag=etree.Element)
    return [child for child in children if name is None or local_name(child) == name]


class XMLConvertable:
    """Base of every record that converts to and from one XPDL element."""

    ELEMENT_NAME = ""

    # ========== XML ==========

    def to_element(self, namespace: Optional[str] = None) -> etree._Element:
        """Write the record as an element in the given namespace."""
        nsmap = {None: namespace} if namespace else None
        element = etree.Element(qualify(self.ELEMENT_NAME, namespace), nsmap=nsmap)
        self._write_attributes(element)
        self._write_children(element, namespace)
        return element

    def to_xml(
        self,
        namespace: Optional[str] = None,
        pretty_print: Optional[bool] = None,
        encoding: Optional[str] = None,
    ) -> bytes:
        settings = get_settings()
        return etree.tostring(
            self.to_element(namespace),
            pretty_print=settings.xml_pretty_print if pretty_print is None else pretty_print,
            encoding=encoding or settings.xml_encoding,
            xml_declaration=True,
        )

    @classmethod
    def from_element(cls: Type[T], element: etree._Element) -> T:
        """
        Read a record from an element, matching its name without namespace.

        Raises:
            XPDLConversionError: If the element is not a ``ELEMENT_NAME`` element
        """
        name = local_name(element)
        if name != cls.ELEMENT_NAME:
            raise XPDLConversionError(f"Expected <{cls.ELEMENT_NAME}>, got <{name}>")
        record = cls()
        record._read_attributes(element)
        record._read_children(element)
        return record

    @classmethod
    def from_xml(cls: Type[T], text: Union[str, bytes]) -> T:
        if isinstance(text, str):
            text = text.encode('utf-8')
        try:
            element = etree.fromstring(text)
        except etree.XMLSyntaxError as e:
            raise XPDLConversionError(f"Invalid XPDL markup: {e}") from e
        return cls.from_element(element)

    def _write_attributes(self, element: etree._Element) -> None:
        pass

    def _write_children(self, element: etree._Element, namespace: Optional[str]) -> None:
        pass

    def _read_attributes(self, element: etree._Element) -> None:
        pass

    def _read_children(self, element: etree._Element) -> None:
        pass

    # ========== JSON ==========

    def read_json(self, model_element: Dict[str, Any]) -> None:
        """Fill the fields found in a JSON model element."""
        pass


class XPDLThing(XMLConvertable):
    """An XPDL element identified by ``Id`` and labelled by ``Name``."""

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None):
        self.id = id
        self.name = name

    def read_json(self, model_element: Dict[str, Any]) -> None:
        super().read_json(model_element)
        if 'resourceId' in model_element:
            self.read_json_resource_id(model_element)
        if 'name' in model_element:
            self.read_json_name(model_element)

    def read_json_resource_id(self, model_element: Dict[str, Any]) -> None:
        self.id = opt_string(model_element, 'resourceId')

    def read_json_name(self, model_element: Dict[str, Any]) -> None:
        self.name = opt_string(model_element, 'name')

    def _write_attributes(self, element: etree._Element) -> None:
        set_attribute(element, 'Id', self.id)
        set_attribute(element, 'Name', self.name)

    def _read_attributes(self, element: etree._Element) -> None:
        self.id = element.get('Id')
        self.name = element.get('Name')


class XPDLThingConnectorGraphics(XPDLThing):
    """
    An XPDL connector with routing coordinates.

    Coordinates come from the editor's dockers and are written as
    ``ConnectorGraphicsInfos/ConnectorGraphicsInfo/Coordinates``.
    """

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None):
        super().__init__(id, name)
        self.coordinates: List[Point] = []

    def read_json(self, model_element: Dict[str, Any]) -> None:
        super().read_json(model_element)
        if 'dockers' in model_element:
            self.read_json_dockers(model_element)

    def read_json_dockers(self, model_element: Dict[str, Any]) -> None:
        dockers = model_element.get('dockers') or []
        try:
            self.coordinates = [
                docker if isinstance(docker, Point) else Point.from_dict(docker)
                for docker in dockers
            ]
        except (TypeError, ValueError) as e:
            raise XPDLConversionError(f"Invalid dockers: {e}") from e

    def _write_children(self, element: etree._Element, namespace: Optional[str]) -> None:
        super()._write_children(element, namespace)
        if not self.coordinates:
            return
        infos = etree.SubElement(element, qualify('ConnectorGraphicsInfos', namespace))
        info = etree.SubElement(infos, qualify('ConnectorGraphicsInfo', namespace))
        set_attribute(info, 'ToolId', get_settings().app_name)
        for point in self.coordinates:
            coordinates = etree.SubElement(info, qualify('Coordinates', namespace))
            coordinates.set('XCoordinate', format_coordinate(point.x))
            coordinates.set('YCoordinate', format_coordinate(point.y))

    def _read_children(self, element: etree._Element) -> None:
        super()._read_children(element)
        self.coordinates = []
        for infos in child_elements(element, 'ConnectorGraphicsInfos'):
            for info in child_elements(infos, 'ConnectorGraphicsInfo'):
                for coordinates in child_elements(info, 'Coordinates'):
                    self.coordinates.append(Point(
                        parse_coordinate(coordinates, 'XCoordinate'),
                        parse_coordinate(coordinates, 'YCoordinate'),
                    ))


def opt_string(model_element: Dict[str, Any], key: str) -> str:
    """String value of a key, or an empty string when the key is missing or null."""
    value = model_element.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
