"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from assetlens.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns one fixed asset.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "assets": [
            {
                "Computer Name": "EXAMPLE-PC",
                "Brand": "Dell",
                "Processor Type": "Intel Core i5",
                "Processor Generation": "8th Gen",
                "RAM (GB)": "8 GB",
                "Operating System OS": "Microsoft Windows 10 Pro",
                "Antivirus": "nill",
                "Remarks": "Critical",
            }
        ]
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
