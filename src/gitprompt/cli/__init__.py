"""The gitprompt command-line interface."""

from ._app import app, main, prompt, run_prompt

__all__ = ["app", "main", "prompt", "run_prompt"]
