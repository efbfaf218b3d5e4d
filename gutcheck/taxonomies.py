"""
Gut Check Taxonomies - Static classification data

Contains:
- Imagery vocabulary (sensory/visual words, substring match)
- Generic business vocabulary (exact token match)
- Hard-to-spell patterns (doubled letters, rare clusters)
- Trend suffixes (currently popular name endings)
- Length thresholds
"""

# ==================== IMAGERY VOCABULARY ====================

IMAGERY_WORDS = [
    'moon', 'sun', 'star', 'river', 'ocean', 'stone', 'lantern', 'forest',
    'shadow', 'light', 'ember', 'storm', 'garden', 'wind', 'cloud', 'mountain'
]

# ==================== GENERIC VOCABULARY ====================

GENERIC_WORDS = [
    'studio', 'labs', 'lab', 'group', 'collective', 'solutions', 'media',
    'creative', 'works', 'company', 'co', 'inc', 'llc', 'systems', 'digital'
]

# ==================== SPELLING PATTERNS ====================

SPELLING_PATTERNS = [
    r'(.)\1',       # doubled character
    r'q(?!u)',      # q without u
    r'xq',
    r'jq',
    r'tz',
    r'zs',
    r'aei',
    r'iou',
]

# ==================== TREND SUFFIXES ====================

TREND_SUFFIXES = ['labs', 'lab', 'studio', 'collective', 'hub']

# ==================== LENGTH THRESHOLDS ====================

LENGTH_THRESHOLDS = {
    'long': {'words': 4, 'chars': 28},    # either one triggers
    'short': {'words': 2, 'chars': 18},   # both required
}

# ==================== PRACTICAL STYLES ====================

PRACTICAL_STYLES = ('clauses', 'combined')

# ==================== CAUTION SIGNALS ====================

# Signals that count against a name, in the order practical feedback lists them
CAUTION_SIGNALS = ('long', 'spelling', 'generic', 'trendy')

GUTCHECK_TIERS = {
    'sound': 'Structurally sound',
    'refine': 'Minor refinement',
    'mixed': 'Mixed trade-offs',
}
