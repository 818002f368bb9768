"""
Generative-text capability used by the recipe assistant.
Anything with generate(prompt, instruction) -> str can stand in for the LLM.
"""

from typing import Protocol

import dspy

from pantry_chef.services.llm.dspy_client import run_with_logging


class TextGenerator(Protocol):
    def generate(
        self, prompt: str, instruction: str = "", *, prompt_name: str = "generate", prompt_version: str = "v1"
    ) -> str:
        ...


class GenerateTextSignature(dspy.Signature):
    """Follow the system instruction and answer the request."""

    system_instruction: str = dspy.InputField(desc="how to answer and in which format")
    prompt: str = dspy.InputField()
    text: str = dspy.OutputField(desc="the complete answer, exactly in the format the instruction asks for")


class DspyTextGenerator(dspy.Module):
    def __init__(self) -> None:
        super().__init__()
        self.predict = dspy.Predict(GenerateTextSignature)

    def forward(self, prompt: str, instruction: str) -> dspy.Prediction:
        return self.predict(prompt=prompt, system_instruction=instruction)

    def generate(
        self, prompt: str, instruction: str = "", *, prompt_name: str = "generate", prompt_version: str = "v1"
    ) -> str:
        prediction = run_with_logging(
            prompt_name=prompt_name,
            prompt_version=prompt_version,
            fn=self.forward,
            prompt=prompt,
            instruction=instruction,
        )
        return (getattr(prediction, "text", "") or "").strip()
