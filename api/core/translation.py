"""
Translation HTTP client helpers (MyMemory API).

Used endpoint:
- GET /get?q=<text>&langpair=<src>|<dst>
    -> {"responseData": {"translatedText": "..."}, "responseStatus": 200}
"""

from __future__ import annotations

from typing import Any

import httpx


# Translation failures are explicit and separable from other runtime errors.
class TranslationError(RuntimeError):
    pass


def _normalize_base_url(base_url: str) -> str:
    base_url = (base_url or "").strip()
    if not base_url:
        raise TranslationError("TRANSLATION_BASE_URL is empty.")
    return base_url.rstrip("/")


def _normalize_lang(code: str, *, label: str) -> str:
    code = (code or "").strip().lower()
    if not code:
        raise TranslationError(f"{label} language code is empty.")
    return code


async def translate_text(
    text: str,
    *,
    source_lang: str,
    target_lang: str,
    base_url: str,
    timeout_s: float = 5.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    Translate `text` from `source_lang` to `target_lang`.

    Blank input is returned as-is without calling the service.
    """
    if not text or not text.strip():
        return text

    base_url = _normalize_base_url(base_url)
    source_lang = _normalize_lang(source_lang, label="Source")
    target_lang = _normalize_lang(target_lang, label="Target")

    async with httpx.AsyncClient(base_url=base_url, timeout=timeout_s, transport=transport) as client:
        resp = await client.get(
            "/get",
            params={"q": text, "langpair": f"{source_lang}|{target_lang}"},
        )

    if resp.status_code != 200:
        body = resp.text[:300]
        raise TranslationError(f"Translation request failed: {resp.status_code} {body}")

    try:
        data: Any = resp.json()
    except ValueError as exc:
        raise TranslationError("Translation service returned a non-JSON body.") from exc

    if not isinstance(data, dict):
        raise TranslationError("Translation service returned a non-object body.")

    # MyMemory reports quota/argument errors with HTTP 200 and its own status.
    response_status = data.get("responseStatus")
    if response_status is not None and str(response_status) != "200":
        details = str(data.get("responseDetails") or "")[:300]
        raise TranslationError(f"Translation service error: {response_status} {details}")

    response_data = data.get("responseData")
    if isinstance(response_data, dict):
        translated = response_data.get("translatedText")
        if isinstance(translated, str) and translated.strip():
            return translated.strip()

    raise TranslationError("Translation service returned an empty translation.")
