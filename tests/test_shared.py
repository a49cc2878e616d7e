"""
Tests for shared utilities
Bucket helpers, ordered set, canonical hashing, disclaimers and config.
"""

import pytest
from pydantic import BaseModel

from skinlogic import config
from skinlogic.engine.models import PerceivedStress
from skinlogic.shared.disclaimer import (
    DSHEA_DISCLAIMER_PLURAL,
    DSHEA_DISCLAIMER_SINGULAR,
    choose_supplement_disclaimer,
    get_disclaimers,
)
from skinlogic.shared.hashing import canonicalize, fingerprint
from skinlogic.shared.ordered_set import OrderedSet
from skinlogic.shared.text import (
    contains_any,
    differs_from,
    equals_any,
    has_any,
    has_substring,
    norm,
)


class PerceivedStressHolder(BaseModel):
    stress: PerceivedStress


class TestBucketHelpers:
    def test_norm_unwraps_enum(self):
        assert norm(PerceivedStress.HIGH) == "high"
        assert norm("  High ") == "high"
        assert norm(None) == ""

    def test_equals_any_ignores_case(self):
        assert equals_any("high", "High", "Overwhelmed")
        assert not equals_any("Low", "High")

    def test_absent_value_never_matches(self):
        assert not equals_any(None, "")
        assert not equals_any("", "")
        assert not differs_from(None, "Good")
        assert not differs_from("", "Good")
        assert not has_substring("", "")

    def test_differs_from(self):
        assert differs_from("Bloating", "Good")
        assert not differs_from("GOOD", "Good")

    def test_has_substring(self):
        assert has_substring("Hot (Steaming)", "hot")
        assert not has_substring("Lukewarm", "hot")

    def test_list_helpers(self):
        assert has_any(["arms", "Neck"], "Arms")
        assert not has_any(None, "Arms")
        assert contains_any(["Night (Sleep)"], "night")
        assert not contains_any([], "night")


class TestOrderedSet:
    def test_keeps_first_insertion_order(self):
        s = OrderedSet(["b", "a"])
        s.add("b")
        s.update(["c", "a"])
        assert s.to_list() == ["b", "a", "c"]
        assert len(s) == 3
        assert "c" in s


class TestDisclaimers:
    def test_singular_and_plural(self):
        assert choose_supplement_disclaimer(1) == DSHEA_DISCLAIMER_SINGULAR
        assert choose_supplement_disclaimer(0) == DSHEA_DISCLAIMER_PLURAL
        assert choose_supplement_disclaimer(7) == DSHEA_DISCLAIMER_PLURAL

    def test_block(self):
        block = get_disclaimers(1)
        assert block["supplements"] == f"* {DSHEA_DISCLAIMER_SINGULAR}"
        assert "not medical advice" in block["not_medical_advice"]
        assert block["version"] == "disclaimer_v1.0"


class TestConfig:
    def test_default_cors_origins(self, monkeypatch):
        monkeypatch.delenv("SKINLOGIC_CORS_ORIGINS", raising=False)
        assert config.get_cors_origins() == ["http://localhost:3000", "http://127.0.0.1:3000"]

    def test_cors_origins_from_env(self, monkeypatch):
        monkeypatch.setenv("SKINLOGIC_CORS_ORIGINS", "https://a.example, https://b.example,")
        assert config.get_cors_origins() == ["https://a.example", "https://b.example"]


class TestCanonicalize:
    def test_volatile_fields_dropped_at_any_depth(self):
        data = {"profile": {"itch": 4, "scan_images": ["a.png"]}, "logs": [{"id": "1", "photo_url": "x"}]}
        assert canonicalize(data) == '{"logs":[{"id":"1"}],"profile":{"itch":4}}'

    def test_custom_exclusion(self):
        data = {"scan_images": ["a.png"], "notes": "private"}
        assert canonicalize(data, exclude=()) == '{"notes":"private","scan_images":["a.png"]}'
        assert canonicalize(data, exclude={"notes"}) == '{"scan_images":["a.png"]}'

    def test_model_input(self):
        s = PerceivedStressHolder(stress=PerceivedStress.HIGH)
        assert canonicalize(s) == '{"stress":"High"}'

    def test_fingerprint_respects_exclusion(self):
        a = {"itch": 4, "notes": "x"}
        b = {"itch": 4, "notes": "y"}
        assert fingerprint(a) != fingerprint(b)
        assert fingerprint(a, exclude={"notes"}) == fingerprint(b, exclude={"notes"})
