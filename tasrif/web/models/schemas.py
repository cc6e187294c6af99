"""Pydantic models for API request/response schemas."""

from typing import List, Literal
from pydantic import BaseModel, Field

from ...conjugator import ConjugationResult
from ...irregular import IrregularVerb
from ...paradigms import PronounEntry
from ...root_types import Root

KeyMode = Literal["label", "native"]


class RootRequest(BaseModel):
    """Request body: the three root letters."""
    root: List[str] = Field(..., min_length=3, max_length=3, description="Root letters, e.g. [\"ك\", \"ت\", \"ب\"]")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"root": ["ك", "ت", "ب"]}
            ]
        }
    }

    @classmethod
    def from_root(cls, root: Root) -> "RootRequest":
        return cls(root=list(root))


class ConjugationItem(BaseModel):
    """A single table row."""
    pronoun: str = Field(..., description="Pronoun label (display or Arabic)")
    verb: str = Field(..., description="Conjugated form")


class ConjugationResponse(BaseModel):
    """Response body for the conjugation endpoints."""
    root: List[str] = Field(..., description="Root letters")
    tense: str = Field(..., description="past or present")
    conjugations: List[ConjugationItem] = Field(default_factory=list, description="14 rows in table order")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "root": ["ك", "ت", "ب"],
                    "tense": "past",
                    "conjugations": [
                        {"pronoun": "هو", "verb": "كَتَبَ"},
                        {"pronoun": "هما (م)", "verb": "كَتَبَا"},
                    ]
                }
            ]
        }
    }

    @classmethod
    def from_result(cls, result: ConjugationResult, keys: KeyMode = "native") -> "ConjugationResponse":
        pairs = result.by_native_label() if keys == "native" else result.by_label()
        return cls(
            root=list(result.root),
            tense=result.tense.value,
            conjugations=[ConjugationItem(pronoun=p, verb=v) for p, v in pairs],
        )


class PronounInfo(BaseModel):
    """One row of the pronoun table."""
    code: str
    label: str
    native_label: str
    past_suffix: str
    present_prefix: str
    present_suffix: str

    @classmethod
    def from_entry(cls, entry: PronounEntry) -> "PronounInfo":
        return cls(
            code=entry.code,
            label=entry.label,
            native_label=entry.native_label,
            past_suffix=entry.past_suffix,
            present_prefix=entry.present_prefix,
            present_suffix=entry.present_suffix,
        )


class PronounsResponse(BaseModel):
    """Response body for the pronouns endpoint."""
    pronouns: List[PronounInfo]


class IrregularVerbInfo(BaseModel):
    """A catalogue entry with its table."""
    category: str
    type_name_ar: str
    root: List[str]
    rule: str
    conjugations: List[ConjugationItem]

    @classmethod
    def from_verb(cls, verb: IrregularVerb, keys: KeyMode = "label") -> "IrregularVerbInfo":
        table = ConjugationResponse.from_result(verb.conjugation(), keys)
        return cls(
            category=verb.category,
            type_name_ar=verb.type_name_ar,
            root=list(verb.root),
            rule=verb.rule,
            conjugations=table.conjugations,
        )


class IrregularVerbsResponse(BaseModel):
    """Response body for the irregular catalogue endpoint."""
    verbs: List[IrregularVerbInfo]
