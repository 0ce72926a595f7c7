# prompt_engine.py
"""Compose AI video prompts from the product form."""

import random
import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Literal, Optional, Sequence, Tuple

from templates import (
    CAMERA_MOVEMENTS,
    LIGHTING_EFFECTS,
    MUSIC_MOOD_PROMPTS,
    SCENE_OPENINGS,
    VISUAL_STYLE_PROMPTS,
)

VisualStyle = Literal["futuristic", "minimalist", "luxury", "streetwear"]
MusicMood = Literal["trap", "cinematic", "electronic", "ambient"]

# Picks one element from a fixed list. random.choice in production.
Picker = Callable[[Sequence[str]], str]

MAX_FEATURES = 5

_WHITESPACE = re.compile(r"\s+")

TECHNICAL_SPECS = "\n".join([
    "TECHNICAL SPECS:",
    "- Duration: 15-30 seconds",
    "- Resolution: 4K (3840×2160)",
    "- Frame rate: 24fps for cinematic feel",
    "- Color grading: Professional commercial standard",
    "- Logo placement: Subtle brand integration in final frames",
])

OUTPUT_FORMAT = (
    "OUTPUT FORMAT: Professional commercial-quality video optimized for social media "
    "platforms (Instagram, TikTok, YouTube Shorts) and product marketing campaigns."
)


@dataclass(frozen=True)
class FormData:
    """Everything the user filled in on the product form.

    Immutable, so a saved record's metadata cannot drift from its prompt.
    Features are held as a tuple whatever sequence is passed in.
    """

    product_name: str
    features: Tuple[str, ...] = ()
    visual_style: VisualStyle = "minimalist"
    music_mood: MusicMood = "ambient"
    slogan: Optional[str] = None
    custom_instructions: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "features", tuple(self.features))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "productName": self.product_name,
            "features": list(self.features),
            "visualStyle": self.visual_style,
            "musicMood": self.music_mood,
        }
        if self.slogan is not None:
            data["slogan"] = self.slogan
        if self.custom_instructions is not None:
            data["customInstructions"] = self.custom_instructions
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormData":
        return cls(
            product_name=data["productName"],
            features=tuple(data.get("features", ())),
            visual_style=data["visualStyle"],
            music_mood=data["musicMood"],
            slogan=data.get("slogan"),
            custom_instructions=data.get("customInstructions"),
        )


@dataclass(frozen=True)
class GeneratedPrompt:
    """A saved prompt. The text is frozen at creation and never recomposed."""

    id: str
    title: str
    prompt: str
    metadata: FormData
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "prompt": self.prompt,
            "metadata": self.metadata.to_dict(),
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratedPrompt":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            prompt=data["prompt"],
            metadata=FormData.from_dict(data["metadata"]),
            created_at=_parse_timestamp(data["createdAt"]),
        )


def _parse_timestamp(value: str) -> datetime:
    # Browser-written payloads end in "Z", which older fromisoformat rejects.
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def clean_features(features: Sequence[str]) -> List[str]:
    return [feature.strip() for feature in features if feature.strip()]


def split_features(text: str, limit: int = MAX_FEATURES) -> List[str]:
    """One feature per line, blank lines skipped, capped at ``limit``."""
    return clean_features(text.splitlines())[:limit]


def is_ready(form: FormData) -> bool:
    return bool(form.product_name.strip()) and len(form.features) > 0


def export_filename(product_name: str) -> str:
    return f"{_WHITESPACE.sub('_', product_name)}_video_prompt.txt"


def record_label(record: GeneratedPrompt) -> str:
    """Library heading: title and creation time in the viewer's local zone."""
    return f"{record.title or 'Untitled'} · {record.created_at.astimezone():%Y-%m-%d %H:%M}"


def compose(form: FormData, pick: Picker = random.choice) -> str:
    """
    Build the multi-section video prompt for ``form``.

    Camera movement and lighting are drawn through ``pick`` (camera first),
    so a deterministic picker gives byte-identical output. Every other
    section comes straight from the form and the fixed tables.
    """
    camera = pick(CAMERA_MOVEMENTS)
    lighting = pick(LIGHTING_EFFECTS)

    features_text = ", ".join(clean_features(form.features))
    visual_style = VISUAL_STYLE_PROMPTS[form.visual_style]
    music_mood = MUSIC_MOOD_PROMPTS[form.music_mood]
    opening = SCENE_OPENINGS.get(form.visual_style, SCENE_OPENINGS["minimalist"])
    focus = f"Focus on showcasing: {features_text}." if features_text else ""

    sections = [
        f'Create a cinematic product showcase video for "{form.product_name}".',
        f"VISUAL STYLE: {visual_style}",
        f"KEY FEATURES TO HIGHLIGHT: {features_text}",
        f"CAMERA WORK: {camera}",
        f"LIGHTING: {lighting}",
        f"MUSIC & AUDIO: {music_mood}",
        f"SCENE DESCRIPTION:\nThe video opens with {opening} the {form.product_name}. {focus} ",
        f"The environment should embody {visual_style}. Use {lighting} to create visual drama "
        f"and highlight the product's premium quality.",
        TECHNICAL_SPECS,
    ]

    if form.slogan:
        sections.append(
            f'TAGLINE INTEGRATION: "{form.slogan}" - Display this text with elegant '
            f"typography in the final 3 seconds."
        )

    if form.custom_instructions:
        sections.append(f"ADDITIONAL NOTES: {form.custom_instructions}")

    sections.append(OUTPUT_FORMAT)
    return "\n\n".join(sections)


def new_generated_prompt(
    form: FormData,
    prompt: Optional[str] = None,
    pick: Picker = random.choice,
    now: Optional[datetime] = None,
) -> GeneratedPrompt:
    """Snapshot ``form`` into a record ready for the store.

    Pass ``prompt`` to keep the exact text the user was shown; otherwise a
    fresh one is composed with newly drawn camera and lighting.
    """
    created_at = now or datetime.now(timezone.utc)
    record_id = f"{int(created_at.timestamp() * 1000)}-{uuid.uuid4().hex[:8]}"
    return GeneratedPrompt(
        id=record_id,
        title=form.product_name,
        prompt=prompt if prompt is not None else compose(form, pick),
        metadata=form,
        created_at=created_at,
    )
