from typing import Optional

from ..domain.payslip import PayslipData, create_default_payslip
from .pdf_parser import parse_pdf_payslip

PDF_CONTENT_TYPE = "application/pdf"


class BaseParser:
    async def parse(self, content: bytes) -> PayslipData:
        """Parse payslip content.

        Parameters
        ----------
        content: bytes
            Raw file content to parse.
        """
        raise NotImplementedError


class PdfPayslipParser(BaseParser):
    """Reads the PDF text layer and maps the known labels."""

    async def parse(self, content: bytes) -> PayslipData:
        return await parse_pdf_payslip(content)


class ImageParser(BaseParser):
    """Images are not read yet; the user fills in the form by hand."""

    async def parse(self, content: bytes) -> PayslipData:
        return create_default_payslip()


def is_image_file(content_type: Optional[str]) -> bool:
    return bool(content_type) and content_type.startswith("image/")


def get_parser(content_type: Optional[str]) -> BaseParser:
    if content_type == PDF_CONTENT_TYPE:
        return PdfPayslipParser()
    if is_image_file(content_type):
        return ImageParser()
    raise ValueError(f"Unsupported content type: {content_type}")
