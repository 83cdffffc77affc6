"""Title tokenization for the docs search index.

Symbol titles are identifiers and module paths rather than prose, so the
tokenizer splits on the separators those use (slashes, dots, underscores,
hyphens) and on camelCase boundaries, and keeps every part.
"""

import re


class TextTokenizer:
    """Tokenizer for symbol titles.

    Features:
    - Case-folds every token
    - Keeps the whole title as its first token
    - Splits module paths ("aiken/collection/list" -> "aiken", "collection", "list")
    - Splits snake_case and kebab-case ("is_empty" -> "is", "empty")
    - Splits CamelCase ("ValidityRange" -> "validity", "range")

    Usage:
        >>> tokenizer = TextTokenizer()
        >>> tokenizer.tokenize("aiken/list")
        ['aiken/list', 'aiken', 'list']

        >>> tokenizer.tokenize("ValidityRange")
        ['validityrange', 'validity', 'range']

        >>> tokenizer.tokenize("from_asset_list")
        ['from_asset_list', 'from', 'asset', 'list']
    """

    # Matches: runs of word characters between separators
    WORD_PATTERN = re.compile(r"[^\W_]+")

    # Lower-to-upper and acronym-to-word boundaries
    CAMEL_PATTERN = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

    def tokenize(self, text: str) -> list[str]:
        """Tokenize a title into its folded form followed by its unique parts.

        Args:
            text: Title to tokenize

        Returns:
            List of tokens: the folded full title, then each part once
            (a one-word title yields the same token twice)
        """
        if not text or not text.strip():
            return []

        parts: list[str] = []
        for word in self.WORD_PATTERN.findall(text):
            for part in self._split_camel_case(word):
                if part not in parts:
                    parts.append(part)

        return [text.strip().casefold()] + parts

    def _split_camel_case(self, word: str) -> list[str]:
        """Split CamelCase word into case-folded components.

        Example:
            >>> self._split_camel_case("OutputReference")
            ['output', 'reference']
            >>> self._split_camel_case("simple")
            ['simple']
        """
        parts = [p for p in self.CAMEL_PATTERN.split(word) if p]
        return [p.casefold() for p in parts]

    @staticmethod
    def normalize_query(query: str) -> str:
        """Normalize query text for consistent processing.

        Example:
            >>> TextTokenizer.normalize_query("  Output   Reference  ")
            'output reference'
        """
        return " ".join(query.split()).casefold()
