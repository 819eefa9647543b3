import io
from unittest.mock import patch

from docx import Document
from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)


def _docx_bytes(lines: list[str]) -> bytes:
    doc = Document()
    for line in lines:
        doc.add_paragraph(line)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert isinstance(data["geminiConfigured"], bool)


def test_parse_text(sample_resume_text):
    response = client.post("/parse/text", json={"rawText": sample_resume_text})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["personalInfo"]["fullName"] == "Jane Smith"
    assert body["data"]["experience"][0]["company"] == "TechCorp"
    assert body["data"]["certifications"] == []


def test_empty_resume():
    response = client.get("/resume/empty")
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["education"]) == 1
    assert data["experience"][0]["description"] == [""]


def test_ats_score(sample_resume_text):
    resume = client.post("/parse/text", json={"rawText": sample_resume_text}).json()["data"]
    response = client.post("/ats-score", json={"resumeData": resume, "jobDescription": "Python"})
    assert response.status_code == 200
    score = response.json()["score"]
    assert 0 <= score["overallScore"] <= 100
    assert set(score["breakdown"]) == {
        "keywordScore",
        "formattingScore",
        "sectionScore",
        "readabilityScore",
        "experienceScore",
    }
    assert isinstance(score["suggestions"], list)


def test_ats_score_requires_resume_data():
    response = client.post("/ats-score", json={"jobDescription": "Python"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_parse_requires_file():
    response = client.post("/parse")
    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


def test_parse_rejects_unsupported_type():
    response = client.post(
        "/parse", files={"file": ("resume.txt", b"not a resume", "text/plain")}
    )
    assert response.status_code == 400
    assert "Unsupported file type" in response.json()["error"]


def test_parse_unreadable_pdf_is_unprocessable():
    response = client.post(
        "/parse", files={"file": ("resume.pdf", b"not really a pdf", "application/pdf")}
    )
    assert response.status_code == 422
    assert "error" in response.json()


def test_parse_docx():
    content = _docx_bytes(["Alex Kim", "alex@kim.io", "Skills", "Python, Go, Rust"])
    response = client.post(
        "/parse",
        files={
            "file": (
                "resume.docx",
                content,
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            )
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["data"]["personalInfo"]["email"] == "alex@kim.io"
    assert body["data"]["skills"][0]["items"] == ["Python", "Go", "Rust"]
    assert body["rawText"].startswith("Alex Kim")


def test_enhance_without_api_key():
    with patch("services.resume_enhancer.gemini_client.get_client", return_value=None):
        response = client.post("/enhance", json={"resumeData": {}})
    assert response.status_code == 500
    assert "GEMINI_API_KEY" in response.json()["error"]


def test_chat_requires_message():
    response = client.post("/chat", json={"message": "   "})
    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}


def test_unknown_route_uses_error_envelope():
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_envelope():
    response = client.get("/ats-score")
    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_ats_score_null_job_description():
    response = client.post("/ats-score", json={"resumeData": {}, "jobDescription": None})
    assert response.status_code == 200
    assert 0 <= response.json()["score"]["overallScore"] <= 100


def test_enhance_null_job_description():
    with patch("services.resume_enhancer.gemini_client.get_client", return_value=object()), \
         patch("services.resume_enhancer.gemini_client.generate_text", return_value=None), \
         patch("services.resume_enhancer.gemini_client.generate_json", return_value=None):
        response = client.post("/enhance", json={"resumeData": {}, "jobDescription": None})
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["changes"] == []
    assert "overallScore" in body["score"]


def test_parse_text_rejects_oversized_input():
    raw_text = "x" * (settings.max_raw_text_chars + 1)
    response = client.post("/parse/text", json={"rawText": raw_text})
    assert response.status_code == 400
    assert "rawText" in response.json()["error"]
