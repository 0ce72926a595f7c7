# templates.py

VISUAL_STYLE_PROMPTS = {
    "futuristic": "ultra-modern, sci-fi aesthetic with neon lighting, holographic elements, metallic surfaces, and high-tech environments",
    "minimalist": "clean, simple design with lots of white space, subtle shadows, geometric shapes, and sophisticated lighting",
    "luxury": "premium, elegant presentation with rich textures, gold accents, marble surfaces, and dramatic lighting",
    "streetwear": "urban, edgy atmosphere with graffiti elements, concrete backgrounds, street culture vibes, and dynamic lighting",
}

MUSIC_MOOD_PROMPTS = {
    "trap": "hard-hitting beats, bass-heavy soundtrack, urban rhythm",
    "cinematic": "orchestral score, dramatic build-up, epic soundtrack",
    "electronic": "synthesized beats, digital soundscape, futuristic audio",
    "ambient": "atmospheric sounds, subtle background music, ethereal tones",
}

# Opening clause of the scene paragraph; anything unlisted falls back to minimalist.
SCENE_OPENINGS = {
    "luxury": "an elegant fade-in revealing",
    "futuristic": "a high-tech materialization of",
    "streetwear": "a dynamic street-style entrance showing",
    "minimalist": "a clean, minimal reveal of",
}

CAMERA_MOVEMENTS = [
    "smooth 360-degree rotation around the product",
    "dramatic zoom-in from wide shot to close-up detail",
    "cinematic dolly push with depth of field transitions",
    "orbital camera movement with dynamic lighting changes",
    "slow-motion reveal with particle effects",
    "tracking shot following the product's key features",
]

LIGHTING_EFFECTS = [
    "dynamic rim lighting that highlights product edges",
    "volumetric fog with dramatic spotlights",
    "color-changing LED environment that matches product tones",
    "golden hour lighting with warm color grading",
    "high-contrast studio lighting with deep shadows",
    "rainbow prism effects creating colorful reflections",
]

PRODUCT_TEMPLATES = {
    "Nike Air Max 270": {
        "features": ["Air Max heel unit", "Breathable mesh upper", "Comfortable cushioning"],
        "visual_style": "streetwear",
        "music_mood": "trap",
        "slogan": "Just Do It",
    },

    "iPhone 15 Pro": {
        "features": ["Titanium design", "48MP camera system", "Action button"],
        "visual_style": "futuristic",
        "music_mood": "electronic",
        "slogan": "Pro. Beyond.",
    },

    "MacBook Pro M3": {
        "features": ["M3 chip performance", "Liquid Retina display", "All-day battery"],
        "visual_style": "minimalist",
        "music_mood": "ambient",
        "slogan": "Supercharged for pros",
    },

    "Rolex Submariner": {
        "features": ["Swiss craftsmanship", "Water resistant to 300m", "Ceramic bezel"],
        "visual_style": "luxury",
        "music_mood": "cinematic",
        "slogan": "A crown for every achievement",
    },
}

RANDOM_SLOGANS = [
    "Redefine your limits",
    "Where innovation meets style",
    "Crafted for excellence",
    "Beyond expectations",
    "Unleash your potential",
    "The future is now",
    "Precision perfected",
    "Born to stand out",
    "Excellence in every detail",
    "Revolutionary by design",
]
