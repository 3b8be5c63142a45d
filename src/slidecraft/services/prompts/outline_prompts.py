"""
Outline generation prompts
"""


class OutlinePrompts:
    """Prompts used to turn a topic into outline points"""

    @staticmethod
    def get_outline_prompt(topic: str, min_points: int = 6) -> str:
        points = ",\n".join(f'        "Point {i + 1}"' for i in range(min_points))
        return f"""
    Create a coherent and relevant outline for the following prompt: {topic}.
    The outline should consist of at least {min_points} points, with each point written as a single sentence.
    Ensure the outline is well-structured and directly related to the topic.
    Return the output in the following JSON format:

    {{
      "outlines": [
{points}
      ]
    }}

    Ensure that the JSON is valid and properly formatted. Do not include any other text or explanations outside the JSON.
    """
