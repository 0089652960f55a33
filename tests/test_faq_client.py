"""Tests for the FAQ generation service client."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from aeo_auditor.audit import analyze_html
from aeo_auditor.faq.client import (
    FaqServiceError,
    FaqServiceNotConfigured,
    build_faq_payload,
    generate_faqs,
    parse_faqs,
)

_ENDPOINT = "http://localhost:4000/api/generate-faqs"


@pytest.fixture()
def report(full_html: str):
    return analyze_html(full_html, "https://example.com/espresso-guide")


class TestBuildFaqPayload:
    def test_fields(self, report) -> None:
        payload = build_faq_payload(report)
        assert set(payload) == {"url", "title", "h1", "description", "headings", "bodyPreview"}
        assert payload["url"] == "https://example.com/espresso-guide"
        assert payload["h1"] == "Home Espresso Machines"
        assert payload["headings"] == list(report.h2s)
        assert payload["bodyPreview"] == report.body_preview


class TestParseFaqs:
    def test_cleans_and_drops_empty_questions(self) -> None:
        items = parse_faqs(
            {
                "faqs": [
                    {"question": "  Is it safe? ", "answer": " Yes. "},
                    {"question": "", "answer": "orphan"},
                    {"answer": "no question"},
                    "junk",
                ]
            }
        )
        assert [(i.question, i.answer) for i in items] == [("Is it safe?", "Yes.")]

    @pytest.mark.parametrize("data", [{}, {"faqs": "nope"}, [], None])
    def test_missing_faqs_list_is_malformed(self, data) -> None:
        with pytest.raises(FaqServiceError, match="unexpected format"):
            parse_faqs(data)


class TestGenerateFaqs:
    def test_success(self, report) -> None:
        with respx.mock:
            route = respx.post(_ENDPOINT).mock(
                return_value=httpx.Response(
                    200, json={"faqs": [{"question": "How hot?", "answer": "93°C."}]}
                )
            )
            items = generate_faqs(report, endpoint=_ENDPOINT)

        assert [(i.question, i.answer) for i in items] == [("How hot?", "93°C.")]
        sent = json.loads(route.calls.last.request.content)
        assert sent["title"] == report.title

    def test_unconfigured_endpoint(self, report, monkeypatch) -> None:
        monkeypatch.setattr("aeo_auditor.faq.client.settings.faq_api_url", "")
        with pytest.raises(FaqServiceNotConfigured):
            generate_faqs(report)

    def test_http_error(self, report) -> None:
        with respx.mock:
            respx.post(_ENDPOINT).mock(return_value=httpx.Response(500, json={"error": "x"}))
            with pytest.raises(FaqServiceError, match="FAQ API error: 500"):
                generate_faqs(report, endpoint=_ENDPOINT)

    def test_malformed_response(self, report) -> None:
        with respx.mock:
            respx.post(_ENDPOINT).mock(return_value=httpx.Response(200, json={"items": []}))
            with pytest.raises(FaqServiceError):
                generate_faqs(report, endpoint=_ENDPOINT)

    def test_invalid_json_body(self, report) -> None:
        with respx.mock:
            respx.post(_ENDPOINT).mock(return_value=httpx.Response(200, text="<html>"))
            with pytest.raises(FaqServiceError, match="invalid JSON"):
                generate_faqs(report, endpoint=_ENDPOINT)

    def test_transport_error(self, report) -> None:
        with respx.mock:
            respx.post(_ENDPOINT).mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(FaqServiceError, match="request failed"):
                generate_faqs(report, endpoint=_ENDPOINT)
