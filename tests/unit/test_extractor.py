"""Tests for the placeholder text extractor and end-to-end scenarios."""

import pytest

from docverify.config.constants import VerificationStatus
from docverify.services.verification.classifier import classify_document
from docverify.services.verification.extractor import (
    IMAGE_TEXT,
    OTHER_TEXT,
    PDF_TEXT,
    MockDocumentExtractor,
    TextExtractor,
)


@pytest.fixture
def extractor():
    return MockDocumentExtractor()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "mime_type, expected",
    [
        ("application/pdf", PDF_TEXT),
        ("APPLICATION/PDF", PDF_TEXT),
        ("image/png", IMAGE_TEXT),
        ("image/jpeg", IMAGE_TEXT),
        ("text/plain", OTHER_TEXT),
        ("application/octet-stream", OTHER_TEXT),
        ("", OTHER_TEXT),
    ],
)
async def test_extract_by_mime_bucket(extractor, mime_type, expected):
    assert await extractor.extract(b"ignored", mime_type) == expected


@pytest.mark.asyncio
async def test_extract_ignores_content(extractor):
    a = await extractor.extract(b"fake template", "application/pdf")
    b = await extractor.extract(b"", "application/pdf")
    assert a == b


def test_stub_texts_are_not_suspicious():
    for text in (PDF_TEXT, IMAGE_TEXT, OTHER_TEXT):
        assert "sample" not in text.lower()


def test_mock_is_a_text_extractor():
    assert isinstance(MockDocumentExtractor(), TextExtractor)


@pytest.mark.asyncio
async def test_custom_extractor_can_be_substituted():
    class FixedExtractor(TextExtractor):
        async def extract(self, content: bytes, mime_type: str) -> str:
            return content.decode()

    text = await FixedExtractor().extract(b"College Diploma", "text/plain")
    assert classify_document(text, "scan.txt").confidence == 85


# ---------------------------------------------------------------------------
# Scenarios: extractor + classifier
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_scenario_university_degree_pdf(extractor):
    text = await extractor.extract(b"%PDF", "application/pdf")
    assert "University Certificate of Achievement" in text
    result = classify_document(text, "university_degree.pdf")
    assert result.status == VerificationStatus.VERIFIED
    assert result.confidence == 85


@pytest.mark.asyncio
async def test_scenario_fake_diploma_template(extractor):
    text = await extractor.extract(b"\x89PNG", "image/png")
    result = classify_document(text, "fake_diploma_template.png")
    assert result.status == VerificationStatus.SUSPICIOUS
    assert result.confidence == 30


@pytest.mark.asyncio
async def test_scenario_plain_text_notes(extractor):
    text = await extractor.extract(b"my notes", "text/plain")
    assert text == "Document content extracted - Professional Certification"
    result = classify_document(text, "notes.txt")
    # Same bucket and text as random.bin, so the same outcome
    assert result.status == VerificationStatus.FAILED
    assert result.confidence == 20


@pytest.mark.asyncio
async def test_scenario_random_binary(extractor):
    text = await extractor.extract(b"\x00\x01", "application/octet-stream")
    result = classify_document(text, "random.bin")
    assert result.status == VerificationStatus.FAILED
    assert result.confidence == 20


@pytest.mark.asyncio
async def test_other_bucket_with_education_filename(extractor):
    text = await extractor.extract(b"", "text/plain")
    result = classify_document(text, "certificate.txt")
    assert result.status == VerificationStatus.VERIFIED
    assert result.confidence == 70
