"""Namespace URIs defined by the Infra Standard.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "HTML_NAMESPACE",
    "MATHML_NAMESPACE",
    "SVG_NAMESPACE",
    "XLINK_NAMESPACE",
    "XMLNS_NAMESPACE",
    "XML_NAMESPACE",
]

HTML_NAMESPACE: str = "http://www.w3.org/1999/xhtml"
MATHML_NAMESPACE: str = "http://www.w3.org/1998/Math/MathML"
SVG_NAMESPACE: str = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE: str = "http://www.w3.org/1999/xlink"
XML_NAMESPACE: str = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE: str = "http://www.w3.org/2000/xmlns/"
