# file_utils.py
# Extracts searchable text from documents.

import os
import logging

import docx
import pdfplumber

logger = logging.getLogger(__name__)


class DocumentError(OSError):
    pass


class UnsupportedDocumentError(DocumentError):
    pass


class DocumentReadError(DocumentError):
    pass


def extract_text_from_pdf(pdf_file_path):
    """Extracts all text from a PDF file."""
    text = ""
    try:
        with pdfplumber.open(pdf_file_path) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
    except Exception as e:
        logger.error("PDF Error: %s -> %s", pdf_file_path, e)
        raise DocumentReadError(f"Failed reading PDF: {pdf_file_path}") from e
    return text


def extract_text_from_docx(docx_file_path):
    """Extracts all text from a DOCX file."""
    text = ""
    try:
        doc = docx.Document(docx_file_path)
        for para in doc.paragraphs:
            text += para.text + "\n"
    except Exception as e:
        logger.error("DOCX Error: %s -> %s", docx_file_path, e)
        raise DocumentReadError(f"Failed reading DOCX: {docx_file_path}") from e
    return text


def extract_text_from_txt(txt_file_path):
    try:
        with open(txt_file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("TXT Error: %s -> %s", txt_file_path, e)
        raise DocumentReadError(f"Failed reading text file: {txt_file_path}") from e


EXTRACTORS = {
    ".pdf": extract_text_from_pdf,
    ".docx": extract_text_from_docx,
    ".txt": extract_text_from_txt,
}


def read_text(path):
    """Picks the extractor by file suffix."""
    suffix = os.path.splitext(str(path))[1].lower()
    extractor = EXTRACTORS.get(suffix)
    if extractor is None:
        raise UnsupportedDocumentError(f"Unknown file type: {path}")
    logger.debug("Reading %s as %s", path, suffix)
    return extractor(path)
