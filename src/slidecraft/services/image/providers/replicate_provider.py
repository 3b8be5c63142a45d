"""
Replicate image generation provider (Stable Diffusion XL predictions)
"""

import asyncio
import logging
from typing import Dict, Any, Optional

import aiohttp

from .base import ImageSourceError, BillingRequiredError, read_json_object

logger = logging.getLogger(__name__)

PENDING_STATUSES = ("starting", "processing")


def build_image_prompt(description: str) -> str:
    """Wrap alt text with photorealism and presentation-quality instructions"""
    return f"""
    Create a highly realistic, professional image based on the following description. The image should look as if captured in real life, with attention to detail, lighting, and texture.

    Description: {description}

    Important Notes:
    - The image must be in a photorealistic style and visually compelling.
    - Ensure all text, signs, or visible writing in the image are in English.
    - Pay special attention to lighting, shadows, and textures to make the image as lifelike as possible.
    - Avoid elements that appear abstract, cartoonish, or overly artistic. The image should be suitable for professional presentations.
    - Focus on accurately depicting the concept described, including specific objects, environment, mood, and context. Maintain relevance to the description provided.

    Example Use Cases: Business presentations, educational slides, professional designs.
    """


class ReplicateImageProvider:
    """
    Replicate prediction provider.

    Flow:
    1. create a prediction job, get its id
    2. poll the job until it leaves starting/processing or the attempt
       ceiling is reached
    3. return the first output URL
    """

    name = "replicate"

    def __init__(self, config: Dict[str, Any]):
        self.api_token = config.get('api_token')
        self.api_base = config.get('api_base', 'https://api.replicate.com/v1')
        self.model_version = config.get(
            'model_version', '7762fd07cf82c948538e41f63f77d685e02b063e37e496e96eefd46c929f9bdc'
        )
        self.width = config.get('width', 1024)
        self.height = config.get('height', 768)
        self.poll_interval = config.get('poll_interval', 2.0)
        self.max_poll_attempts = config.get('max_poll_attempts', 30)
        self.timeout = config.get('timeout', 30)

        if not self.api_token:
            logger.debug("Replicate API token not configured")

    @property
    def enabled(self) -> bool:
        return bool(self.api_token)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Token {self.api_token}",
            "Content-Type": "application/json",
        }

    def _prepare_api_request(self, alt_text: str) -> Dict[str, Any]:
        return {
            "version": self.model_version,
            "input": {
                "prompt": build_image_prompt(alt_text),
                "width": self.width,
                "height": self.height,
                "num_outputs": 1,
                "scheduler": "K_EULER",
                "num_inference_steps": 30,
                "guidance_scale": 7.5,
                "refine": "expert_ensemble_refiner",
                "refine_steps": 5,
            },
        }

    async def resolve(self, alt_text: str) -> str:
        if not self.enabled:
            raise ImageSourceError("Replicate API token not configured")

        url = f"{self.api_base.rstrip('/')}/predictions"
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(url, headers=self._headers(), json=self._prepare_api_request(alt_text)) as response:
                if response.status == 402:
                    raise BillingRequiredError("Replicate API: payment required")
                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    raise ImageSourceError(f"Replicate API error {response.status}: {error_text[:200]}")
                result = await read_json_object(response, "Replicate")

            prediction_id = result.get('id')
            if not prediction_id:
                raise ImageSourceError("No prediction ID received from Replicate")

            logger.info(f"Replicate prediction started: {prediction_id}")
            result = await self._poll_prediction(session, prediction_id, result)

        return self._extract_output(prediction_id, result)

    async def _poll_prediction(
        self,
        session: aiohttp.ClientSession,
        prediction_id: str,
        result: Dict[str, Any]
    ) -> Dict[str, Any]:
        url = f"{self.api_base.rstrip('/')}/predictions/{prediction_id}"
        attempts = 0

        while result.get('status') in PENDING_STATUSES and attempts < self.max_poll_attempts:
            attempts += 1
            logger.debug(
                f"Polling attempt {attempts}/{self.max_poll_attempts}, status: {result.get('status')}"
            )
            await asyncio.sleep(self.poll_interval)

            async with session.get(url, headers=self._headers()) as response:
                if not 200 <= response.status < 300:
                    raise ImageSourceError(f"Polling error: {response.status}")
                result = await read_json_object(response, "Replicate")

        if result.get('status') in PENDING_STATUSES:
            raise ImageSourceError(
                f"Image generation timed out after {attempts} polling attempts"
            )
        return result

    @staticmethod
    def _extract_output(prediction_id: str, result: Dict[str, Any]) -> str:
        status = result.get('status')
        output = result.get('output')

        if status == 'succeeded':
            first: Optional[str] = None
            if isinstance(output, list) and output and isinstance(output[0], str):
                first = output[0]
            elif isinstance(output, str):
                first = output
            if first:
                logger.info(f"Replicate prediction {prediction_id} succeeded")
                return first
            raise ImageSourceError("Replicate prediction succeeded without output")

        if status == 'failed':
            raise ImageSourceError(f"Image generation failed: {result.get('error')}")

        raise ImageSourceError(f"Unknown prediction status: {status}")
