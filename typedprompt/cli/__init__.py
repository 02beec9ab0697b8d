from .prompts import prompt_float, prompt_int, prompt_str, prompt_confirm, prompt_choice

__all__ = [
    "prompt_float", "prompt_int", "prompt_str", "prompt_confirm", "prompt_choice",
]
