"""
Mock text generator for testing
Scripted replies and failures, no network
"""
from typing import Any, Dict, Optional

from knowzone.core.exceptions import AIServiceError
from knowzone.services.text_generator import TextGenerator


class MockTextGenerator(TextGenerator):
    """Returns predefined responses and records what it was asked"""

    name = 'mock'

    def __init__(self):
        self.call_count = 0
        self.last_prompt: Optional[str] = None
        self.last_system: Optional[str] = None
        self.last_schema: Optional[Dict[str, Any]] = None
        self.text_response = 'Mock response from KnowZone AI'
        self.json_response: Optional[Any] = None
        self.error: Optional[Exception] = None

    def set_text(self, text: str):
        self.text_response = text

    def set_json(self, value: Any):
        self.json_response = value

    def fail_with(self, error: Optional[Exception] = None):
        """Make every following call raise"""
        self.error = error or AIServiceError('Mock AI outage')

    def _record(self, prompt: str, system_prompt: Optional[str]):
        self.call_count += 1
        self.last_prompt = prompt
        self.last_system = system_prompt
        if self.error is not None:
            raise self.error

    async def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        self._record(prompt, system_prompt)
        return self.text_response

    async def generate_json(
        self,
        prompt: str,
        schema: Dict[str, Any],
        system_prompt: Optional[str] = None,
    ) -> Optional[Any]:
        self.last_schema = schema
        self._record(prompt, system_prompt)
        return self.json_response
