from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings


def get_tutor_agent(
    model: Model, instructions: str, max_tokens: int, temperature: float
) -> Agent[None, str]:
    """Build a single-turn tutor agent; each chat message gets fresh instructions."""
    return Agent(
        model,
        output_type=str,
        instructions=instructions,
        model_settings=ModelSettings(max_tokens=max_tokens, temperature=temperature),
    )
