from typing import Any, Dict, Tuple

import frontmatter
import yaml


class FrontMatterError(ValueError):
    """Raised when a front matter block cannot be read as string-keyed metadata."""


class ContentParser:
    """
    Split content files into front matter and markdown body, and back.
    Reading detects the front matter format; writing always emits YAML.
    """

    def __init__(self, handler=None):
        self.handler = handler or frontmatter.YAMLHandler()

    def parse(self, text: str) -> Tuple[Dict[str, Any], str]:
        """Return (metadata, body) for a content file's text."""
        if isinstance(text, bytes):
            # If somehow bytes slipped in, decode to string
            text = text.decode("utf-8", errors="ignore")
        text = text.lstrip("\ufeff")

        # loads() passes metadata as Post kwargs, which clashes with "content".
        try:
            metadata, body = frontmatter.parse(text)
        except yaml.YAMLError as e:
            raise FrontMatterError(f"malformed front matter: {e}") from e
        except (TypeError, ValueError) as e:
            raise FrontMatterError(f"unreadable front matter: {e}") from e

        bad_keys = [key for key in metadata if not isinstance(key, str)]
        if bad_keys:
            raise FrontMatterError(f"non-string front matter keys: {bad_keys!r}")
        return dict(metadata), body

    def dump(self, metadata: Dict[str, Any], body: str) -> str:
        """Serialize metadata and body back into a content file."""
        post = frontmatter.Post(body, handler=self.handler)
        post.metadata.update(metadata)
        return frontmatter.dumps(post, sort_keys=False)
