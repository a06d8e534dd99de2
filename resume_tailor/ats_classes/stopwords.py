"""stopwords.py
Words never treated as job keywords: common English function words plus
generic job-posting filler.
"""

STOPWORDS = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "from", "has", "have", "had",
    "he", "she", "they", "them", "their", "the", "to", "of", "on", "or", "in", "is", "it", "its",
    "this", "that", "these", "those", "with", "will", "would", "can", "could", "should", "may",
    "we", "our", "you", "your", "i", "me", "my", "us", "than", "then", "into", "over", "under",
    "within", "across", "per", "using", "use", "used", "work", "works", "working", "role",
    "responsibilities", "requirements", "preferred", "years", "year", "experience",
    "strong", "excellent", "ability", "skills", "team", "teams", "including", "plus",
])

# Tokens shorter than three characters that are still meaningful (languages)
SHORT_TOKEN_ALLOWLIST = frozenset(["c", "r", "go", "js", "ts"])

# Canonical spelling for tokens that are written several ways
KEYWORD_SYNONYMS = {
    "typescript": "ts",
    "javascript": "js",
    "node": "node.js",
}
