"""Module with a client for chats with remote LLMs."""

import asyncio
import hashlib
import json
from typing import Any, ClassVar, TypeVar

from cerebras.cloud.sdk import Cerebras
from diskcache import Cache
from pydantic import BaseModel

from textprobe.configuration import config
from textprobe.data_models import ChatMessage

T = TypeVar("T", bound=BaseModel)


def clean_json_response(response: str) -> str:
    """
    Strip markdown code fences and any prose around a JSON object.

    Args:
        response (str): Raw reply of an LLM.

    Returns:
        str: The part of the reply between the first `{` and the last `}`, or
            the fence-stripped reply if there is no such part.
    """
    cleaned = response.strip()
    cleaned = cleaned.removeprefix("```json").removeprefix("```")
    cleaned = cleaned.removesuffix("```").strip()

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start >= 0 and end > start:
        cleaned = cleaned[start : end + 1]
    return cleaned


class ChatHistory:
    """History of a chat with an LLM convertible to OpenAI compatible format."""

    def __init__(self, system_prompt: str) -> None:
        """
        Initialise an new chat with an empty cache.

        Args:
            system_prompt (str): System prompt for an LLM to be used in the chat.
        """
        self._history: list[ChatMessage] = [
            ChatMessage(message=system_prompt, role="system")
        ]
        self._state_changed = False
        self._cache = [message.to_dict() for message in self._history]

    def add_message(self, message: ChatMessage) -> None:
        """
        Add a new message to chat.

        Args:
            message (ChatMessage): Message to be added.
        """
        self._history.append(message)
        self._state_changed = True

    def to_raw(self) -> list[dict[str, str]]:
        """
        Convert current chat history to an OpenAI-compatible format.

        Returns:
            list[dict[str, str]]: OpenAI-compatible chat history.
        """
        if not self._state_changed:
            return self._cache

        self._cache = [message.to_dict() for message in self._history]
        self._state_changed = False
        return self._cache


class LLM:
    """Wrapper for handling chats with LLMs using a remote inference provider."""

    _cache: ClassVar[Cache | None] = None

    def __init__(
        self,
        system_prompt: str = "You are a helpful assistant.",
        model: str = config.llm_model,
        api_key: str | None = config.cerebras_api_key,
    ) -> None:
        """
        Initialise a chat with a remote LLM.

        Args:
            system_prompt (str, optional): System prompt for the LLM.
                Defaults to "You are a helpful assistant.".
            model (str, optional): Name of the model to be used in the entire chat
                history. Defaults to the value from the configuration.
            api_key (str | None, optional): Key of the inference provider.
                Defaults to the value from the configuration.

        Raises:
            ValueError: Raised if LLM inference provider API key is missing.
        """
        if not api_key:
            raise ValueError(
                "Cerebras API key is not set. "
                "Provide config.cerebras_api_key or set CEREBRAS_API_KEY."
            )
        self.model = model
        self._chat_history = ChatHistory(system_prompt)
        self._cerebras_client = Cerebras(api_key=api_key)

    @classmethod
    def get_cache(cls) -> Cache:
        """
        Get the on-disk cache of LLM responses shared by all chats.

        Returns:
            Cache: The cache, limited to 128 MB.
        """
        if cls._cache is None:
            config.llm_cache_directory.mkdir(exist_ok=True, parents=True)
            cls._cache = Cache(config.llm_cache_directory, size_limit=2**27)
        return cls._cache

    def _to_cache_key(self, *, structured_response_expected: bool) -> str:
        data = (
            f"{structured_response_expected}|{self.model}|{self._chat_history.to_raw()}"
        )
        return hashlib.sha256(data.encode()).hexdigest()

    def _build_json_schema_response_format(
        self, model: type[BaseModel]
    ) -> dict[str, Any]:
        """Build a JSON schema response format for Cerebras Inference."""
        schema = model.model_json_schema()

        properties = {}
        for field_name, field_info in schema.get("properties", {}).items():
            field_schema = {
                "type": field_info.get("type", "string"),
                "description": field_info.get("description", ""),
            }
            if "items" in field_info:
                field_schema["items"] = field_info["items"]
            properties[field_name] = field_schema

        return {
            "type": "json_schema",
            "json_schema": {
                "name": model.__name__,
                "strict": True,
                "schema": {
                    "type": "object",
                    "properties": properties,
                    "required": schema.get("required", []),
                    "additionalProperties": False,
                },
            },
        }

    async def _complete(self, **kwargs: Any) -> str:
        completion = await asyncio.to_thread(
            self._cerebras_client.chat.completions.create,
            model=self.model,
            messages=self._chat_history.to_raw(),
            **kwargs,
        )
        response = completion.choices[0].message.content
        if not response:
            raise ValueError("The response from the LLM is empty.")
        return str(response)

    async def get_structured_response(
        self, prompt: str, structured_response_model: type[T]
    ) -> T:
        """
        Get a structured response from an LLM in a chat.

        Args:
            prompt (str): Prompt to be sent to the LLM to explain it
                how the output should be filled.
            structured_response_model (type[T]): Type of the response derived from
                the Pydantic `BaseModel`.

        Raises:
            ValueError: Raised if the response is empty or does not match the model.

        Returns:
            T: A structured output generated by the LLM.
        """
        self._chat_history.add_message(ChatMessage(message=prompt, role="user"))

        cache = self.get_cache()
        key = self._to_cache_key(structured_response_expected=True)
        if key in cache:
            response_text = str(cache[key])
        else:
            response_text = await self._complete(
                response_format=self._build_json_schema_response_format(
                    structured_response_model
                )
            )

        response = structured_response_model.model_validate(
            json.loads(clean_json_response(response_text))
        )
        # Only valid responses are cached.
        cache[key] = response_text

        self._chat_history.add_message(
            ChatMessage(message=response.model_dump_json(), role="assistant")
        )
        return response
