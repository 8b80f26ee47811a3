"""OpenAI Responses API client for nutrition analysis."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from food_diary.services.nutrition import NutritionAnalysisError, NutritionClient


@dataclass
class OpenAINutritionClient(NutritionClient):
    """Nutrition client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    temperature: float = 0.3
    max_output_tokens: int = 500

    @classmethod
    def create(cls, api_key: str) -> "OpenAINutritionClient":
        """Create an OpenAI nutrition client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def analyze(
        self,
        *,
        model: str,
        store: bool,
        system_prompt: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            instructions=system_prompt,
            input=[
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "food_analysis",
                    "strict": True,
                    "schema": schema,
                }
            },
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            store=store,
        )
        output_text = response.output_text
        if not output_text:
            raise NutritionAnalysisError("OpenAI returned an empty response")
        try:
            payload = json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise NutritionAnalysisError("OpenAI returned malformed JSON") from exc
        if not isinstance(payload, dict):
            raise NutritionAnalysisError("OpenAI returned a non-object payload")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
