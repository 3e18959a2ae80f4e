"""
SOAP 1.1 envelope codec for the student operations.

Requests look like::

    <SOAP-ENV:Envelope xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/"
                       xmlns:tns="http://learning.com/crud/soap">
      <SOAP-ENV:Body>
        <tns:createStudentRequest>
          <tns:name>John Doe</tns:name>
          <tns:age>15</tns:age>
          <tns:grade>A</tns:grade>
        </tns:createStudentRequest>
      </SOAP-ENV:Body>
    </SOAP-ENV:Envelope>

Responses wrap a ``student`` element inside ``<operation>Response``.
"""
import xml.etree.ElementTree as ET
from typing import Tuple

from student_crud.core.exceptions import BadRequestException
from student_crud.schemas.student import StudentResponse

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAP_ENV_PREFIX = "SOAP-ENV"
PAYLOAD_PREFIX = "tns"

STUDENT_FIELDS = ("id", "name", "age", "grade")

ET.register_namespace(SOAP_ENV_PREFIX, SOAP_ENV_NS)


def _local_name(tag: str) -> Tuple[str, str]:
    """Split '{namespace}local' into (namespace, local)."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def parse_request(body: bytes, namespace: str) -> Tuple[str, ET.Element]:
    """
    Return (operation, payload element) for a SOAP request.

    The operation is the payload's local name with the trailing "Request"
    removed, e.g. "createStudent".
    """
    if not body:
        raise BadRequestException("Empty SOAP request")
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise BadRequestException(f"Malformed XML: {e}")

    if root.tag != f"{{{SOAP_ENV_NS}}}Envelope":
        raise BadRequestException("Root element is not a SOAP 1.1 Envelope")

    soap_body = root.find(f"{{{SOAP_ENV_NS}}}Body")
    if soap_body is None or len(soap_body) == 0:
        raise BadRequestException("SOAP Body is missing or empty")

    payload = soap_body[0]
    payload_ns, local = _local_name(payload.tag)
    if payload_ns != namespace or not local.endswith("Request"):
        raise BadRequestException(f"Unsupported SOAP payload: {payload.tag}")

    return local[: -len("Request")], payload


def child_text(payload: ET.Element, name: str, namespace: str) -> str:
    """Text of a required child element, qualified or not, returned verbatim."""
    element = payload.find(f"{{{namespace}}}{name}")
    if element is None:
        element = payload.find(name)
    if element is None:
        raise BadRequestException(f"Missing element: {name}")
    return element.text or ""


def child_int(payload: ET.Element, name: str, namespace: str) -> int:
    value = child_text(payload, name, namespace).strip()
    try:
        return int(value)
    except ValueError:
        raise BadRequestException(f"Element {name} must be an integer, got {value!r}")


def _envelope() -> Tuple[ET.Element, ET.Element]:
    envelope = ET.Element(f"{{{SOAP_ENV_NS}}}Envelope")
    ET.SubElement(envelope, f"{{{SOAP_ENV_NS}}}Header")
    body = ET.SubElement(envelope, f"{{{SOAP_ENV_NS}}}Body")
    return envelope, body


def _serialize(envelope: ET.Element) -> bytes:
    return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)


def build_student_response(operation: str, student: StudentResponse, namespace: str) -> bytes:
    ET.register_namespace(PAYLOAD_PREFIX, namespace)
    envelope, body = _envelope()
    response = ET.SubElement(body, f"{{{namespace}}}{operation}Response")
    node = ET.SubElement(response, f"{{{namespace}}}student")
    for field in STUDENT_FIELDS:
        ET.SubElement(node, f"{{{namespace}}}{field}").text = str(getattr(student, field))
    return _serialize(envelope)


def build_fault(
    fault_code: str,
    message: str,
    code: str,
    status: int,
    timestamp: str,
    namespace: str,
) -> bytes:
    """
    SOAP 1.1 Fault. ``fault_code`` is "Client" or "Server"; the detail block
    carries the error code, status and timestamp.
    """
    ET.register_namespace(PAYLOAD_PREFIX, namespace)
    envelope, body = _envelope()
    fault = ET.SubElement(body, f"{{{SOAP_ENV_NS}}}Fault")
    ET.SubElement(fault, "faultcode").text = f"{SOAP_ENV_PREFIX}:{fault_code}"
    ET.SubElement(fault, "faultstring").text = message
    detail = ET.SubElement(fault, "detail")
    error = ET.SubElement(detail, f"{{{namespace}}}error")
    ET.SubElement(error, f"{{{namespace}}}code").text = code
    ET.SubElement(error, f"{{{namespace}}}status").text = str(status)
    ET.SubElement(error, f"{{{namespace}}}timestamp").text = timestamp
    ET.SubElement(error, f"{{{namespace}}}message").text = message
    return _serialize(envelope)
