"""NameReplacer: Literal multi-pair find/replace for Glue resource names"""

import re
from typing import Dict


class NameReplacer:
    """NameReplacer: Replace every occurrence of each key with its value in a single pass

    Common Usage:
        ```python
        replacer = NameReplacer({"dev": "prod", "eu-west-1": "us-east-1"})
        replacer.replace("dev_ingest_eu-west-1")
        'prod_ingest_us-east-1'
        ```

    The text is scanned left to right. At each position the keys are tried in
    insertion order and the first one that matches wins. Replacement output is
    never rescanned, so {"a": "b", "b": "c"} turns "ab" into "bc".
    """

    def __init__(self, pairs: Dict[str, str] = None):
        """NameReplacer Initialization

        Args:
            pairs (dict, optional): Mapping of literal substrings to their replacements
        """
        self.pairs = dict(pairs or {})
        if "" in self.pairs:
            raise ValueError("NameReplacer keys must be non-empty strings")

        # Alternation order gives the earlier key priority at the same position
        if self.pairs:
            self._pattern = re.compile("|".join(re.escape(key) for key in self.pairs))
        else:
            self._pattern = None

    def replace(self, text: str) -> str:
        """Apply all the replacements to the given text

        Args:
            text (str): The original name

        Returns:
            str: The name with every key replaced by its value
        """
        if self._pattern is None or text is None:
            return text
        return self._pattern.sub(lambda match: self.pairs[match.group(0)], text)

    def __bool__(self) -> bool:
        return bool(self.pairs)

    def __repr__(self) -> str:
        return f"NameReplacer({self.pairs})"


if __name__ == "__main__":
    """Exercise the NameReplacer Class"""
    my_replacer = NameReplacer({"dev": "prod", "eu-west-1": "us-east-1"})
    print(my_replacer.replace("dev_ingest_eu-west-1"))
    print(NameReplacer({"a": "b", "b": "c"}).replace("ab"))
