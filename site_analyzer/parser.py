# site_analyzer/parser.py
from bs4 import BeautifulSoup, Comment

from .exceptions import ValidationError

# Text inside these never renders as page copy
INVISIBLE_TAGS = {"script", "style", "noscript", "template"}


class ParsedDocument:
    """
    Thin wrapper over a BeautifulSoup tree with the CSS-selector queries the
    scorers need. The tree is never mutated after parsing.
    """

    def __init__(self, html: str):
        self.html = html or ""
        self.soup = BeautifulSoup(self.html, "html.parser")

    def select(self, selector: str):
        return self.soup.select(selector)

    def count(self, selector: str) -> int:
        return len(self.soup.select(selector))

    def exists(self, selector: str) -> bool:
        return self.soup.select_one(selector) is not None

    @property
    def body(self):
        return self.soup.body

    @property
    def visible_text(self) -> str:
        body = self.soup.body
        if body is None:
            return ""
        chunks = []
        for node in body.find_all(string=True):
            if isinstance(node, Comment):
                continue
            if node.parent is not None and node.parent.name in INVISIBLE_TAGS:
                continue
            chunks.append(str(node))
        return "".join(chunks).strip()


def parse_document(html: str) -> ParsedDocument:
    return ParsedDocument(html)


def validate_document(doc: ParsedDocument) -> ParsedDocument:
    if doc.body is None:
        raise ValidationError("No body element found on the page")
    if not doc.visible_text:
        raise ValidationError("No visible text content found on the page")
    return doc


def load_document(html: str) -> ParsedDocument:
    """Parse and validate in one step."""
    return validate_document(parse_document(html))
