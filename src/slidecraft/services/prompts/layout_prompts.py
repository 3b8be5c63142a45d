"""
Slide layout generation prompts
"""

from ..layout.models import ContentType, LayoutType, DEFAULT_SLIDE_CLASS


def _quoted(values) -> str:
    return ", ".join(f'"{v.value}"' for v in values)


class LayoutPrompts:
    """Prompts used to generate one slide layout per outline point"""

    @staticmethod
    def get_single_layout_prompt(outline: str, index: int) -> str:
        """Prompt for exactly one layout JSON object"""
        return f"""### IMPORTANT: Generate ONE complete JSON layout object for a presentation slide.

OUTLINE: "{outline}"

REQUIREMENTS:
1. Generate exactly ONE layout based ONLY on the provided outline
2. Use layout types: {_quoted(LayoutType)}
3. Content types: {_quoted(ContentType)}
4. Include relevant images with descriptive alt text
5. Fill all content fields with meaningful data related to the outline
6. "content" is a string for headings, paragraphs and images, a list of strings for lists, a list of rows for tables, and a list of content objects for "column" and "resizable-column"

STRICT FORMAT - Return ONLY this JSON structure:
```json
{{
  "id": "unique-id-here",
  "slideName": "Descriptive slide title",
  "type": "imageAndText",
  "slideOrder": {index + 1},
  "className": "{DEFAULT_SLIDE_CLASS}",
  "content": {{
    "id": "unique-content-id",
    "type": "column",
    "name": "Column",
    "content": [
      {{
        "id": "unique-heading-id",
        "type": "heading1",
        "name": "Heading1",
        "content": "Your main heading here",
        "placeholder": "Heading1"
      }},
      {{
        "id": "unique-paragraph-id",
        "type": "paragraph",
        "name": "Paragraph",
        "content": "Detailed content based on the outline",
        "placeholder": "Content"
      }},
      {{
        "id": "unique-image-id",
        "type": "image",
        "name": "Image",
        "content": "placeholder-image.jpg",
        "alt": "Descriptive alt text related to the outline topic",
        "placeholder": "Image"
      }}
    ]
  }}
}}
```

Generate the complete JSON now:"""
