# =============================================================================
# core/constants.py - Reference Library Vocabularies
# =============================================================================
# Closed vocabularies shared by the brand reference library and the
# deliverable style library:
# - Tone / energy / color buckets for brand references
# - Deliverable types and style axes for deliverable style references
#
# Values are what the record store holds; labels are for display only.
# =============================================================================

from enum import Enum


# =============================================================================
# Brand Reference Buckets
# =============================================================================

class ToneBucket(str, Enum):
    """Tone of a brand, from serious to playful."""
    SERIOUS = "serious"
    BALANCED = "balanced"
    PLAYFUL = "playful"


class EnergyBucket(str, Enum):
    """Visual energy of a brand, from calm/minimal to energetic/bold."""
    MINIMAL = "minimal"
    BALANCED = "balanced"
    BOLD = "bold"


class ColorBucket(str, Enum):
    """Dominant color character of a brand or reference image."""
    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"
    VIBRANT = "vibrant"
    MUTED = "muted"


# Shared middle label for every signal axis
BALANCED = "balanced"

TONE_BUCKET_LABELS: dict[str, str] = {
    ToneBucket.SERIOUS.value: "Serious",
    ToneBucket.BALANCED.value: "Balanced",
    ToneBucket.PLAYFUL.value: "Playful",
}

ENERGY_BUCKET_LABELS: dict[str, str] = {
    EnergyBucket.MINIMAL.value: "Minimal",
    EnergyBucket.BALANCED.value: "Balanced",
    EnergyBucket.BOLD.value: "Bold",
}

COLOR_BUCKET_LABELS: dict[str, str] = {
    ColorBucket.WARM.value: "Warm",
    ColorBucket.COOL.value: "Cool",
    ColorBucket.NEUTRAL.value: "Neutral",
    ColorBucket.VIBRANT.value: "Vibrant",
    ColorBucket.MUTED.value: "Muted",
}


# =============================================================================
# Deliverable Style Library
# =============================================================================

class DeliverableType(str, Enum):
    """Deliverable formats a style reference can belong to."""
    INSTAGRAM_POST = "instagram_post"
    INSTAGRAM_STORY = "instagram_story"
    INSTAGRAM_REEL = "instagram_reel"
    LINKEDIN_POST = "linkedin_post"
    LINKEDIN_BANNER = "linkedin_banner"
    FACEBOOK_AD = "facebook_ad"
    TWITTER_POST = "twitter_post"
    YOUTUBE_THUMBNAIL = "youtube_thumbnail"
    EMAIL_HEADER = "email_header"
    PRESENTATION_SLIDE = "presentation_slide"
    WEB_BANNER = "web_banner"
    STATIC_AD = "static_ad"
    VIDEO_AD = "video_ad"


class StyleAxis(str, Enum):
    """Style direction a deliverable style reference exemplifies."""
    MINIMAL = "minimal"
    BOLD = "bold"
    EDITORIAL = "editorial"
    CORPORATE = "corporate"
    PLAYFUL = "playful"
    PREMIUM = "premium"
    ORGANIC = "organic"
    TECH = "tech"


DELIVERABLE_TYPE_LABELS: dict[str, str] = {
    DeliverableType.INSTAGRAM_POST.value: "Instagram Post",
    DeliverableType.INSTAGRAM_STORY.value: "Instagram Story",
    DeliverableType.INSTAGRAM_REEL.value: "Instagram Reel",
    DeliverableType.LINKEDIN_POST.value: "LinkedIn Post",
    DeliverableType.LINKEDIN_BANNER.value: "LinkedIn Banner",
    DeliverableType.FACEBOOK_AD.value: "Facebook Ad",
    DeliverableType.TWITTER_POST.value: "Twitter/X Post",
    DeliverableType.YOUTUBE_THUMBNAIL.value: "YouTube Thumbnail",
    DeliverableType.EMAIL_HEADER.value: "Email Header",
    DeliverableType.PRESENTATION_SLIDE.value: "Presentation Slide",
    DeliverableType.WEB_BANNER.value: "Web Banner",
    DeliverableType.STATIC_AD.value: "Static Ad",
    DeliverableType.VIDEO_AD.value: "Video Ad",
}

# (label, description) per axis
STYLE_AXIS_LABELS: dict[str, tuple[str, str]] = {
    StyleAxis.MINIMAL.value: ("Minimal", "Clean, simple, whitespace-focused"),
    StyleAxis.BOLD.value: ("Bold", "Strong contrasts, impactful visuals"),
    StyleAxis.EDITORIAL.value: ("Editorial", "Magazine-style, content-rich"),
    StyleAxis.CORPORATE.value: ("Corporate", "Professional, business-focused"),
    StyleAxis.PLAYFUL.value: ("Playful", "Fun, colorful, energetic"),
    StyleAxis.PREMIUM.value: ("Premium", "Luxury, high-end, refined"),
    StyleAxis.ORGANIC.value: ("Organic", "Natural, flowing, earthy"),
    StyleAxis.TECH.value: ("Tech", "Modern, digital, futuristic"),
}

DELIVERABLE_TYPES: tuple[str, ...] = tuple(t.value for t in DeliverableType)
STYLE_AXES: tuple[str, ...] = tuple(a.value for a in StyleAxis)
