"""Content generation through an external command-line tool."""

import asyncio
import logging
import shlex
from typing import Iterable, List, Optional, Sequence, Union

from ..utils.errors import GenerationFailedError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "copilot"
DEFAULT_ARGS = ("--silent", "--allow-all")


class ContentGenerator:
    """Runs the generation tool once per prompt and collects its output.

    The tool is invoked as ``<command> -p <prompt> <extra args> [--model M]``
    and must print the generated Markdown on stdout. A non-zero exit status,
    a launch failure or a timeout raises ``GenerationFailedError``; none of
    them are retried here.
    """

    def __init__(
        self,
        command: Union[str, Sequence[str]] = DEFAULT_COMMAND,
        model: Optional[str] = None,
        timeout: Optional[float] = 300.0,
        extra_args: Sequence[str] = DEFAULT_ARGS,
    ):
        self.command = shlex.split(command) if isinstance(command, str) else list(command)
        if not self.command:
            raise ValueError("Generation command must not be empty")
        self.model = model
        self.timeout = timeout
        self.extra_args = list(extra_args)

        logger.info(
            f"Initialized content generator: {self.command[0]}"
            + (f" (model: {model})" if model else "")
        )

    def build_command(self, prompt: str) -> List[str]:
        args = [*self.command, "-p", prompt, *self.extra_args]
        if self.model:
            args += ["--model", self.model]
        return args

    async def generate(self, prompt: str) -> str:
        """Run the tool for a single prompt and return its trimmed stdout."""
        args = self.build_command(prompt)
        tool = self.command[0]
        logger.debug(f"Executing: {tool} with a {len(prompt)} character prompt")

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            raise GenerationFailedError(
                f"Failed to launch '{tool}'. Ensure it is installed and authenticated: {e}",
                launched=False,
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            self._kill(process)
            await process.wait()
            raise GenerationFailedError(f"'{tool}' timed out after {self.timeout} seconds")
        except asyncio.CancelledError:
            self._kill(process)
            await asyncio.shield(process.wait())
            raise

        error_output = stderr.decode("utf-8", errors="replace").strip()
        if process.returncode != 0:
            logger.error(f"'{tool}' exited with code {process.returncode}: {error_output}")
            raise GenerationFailedError(
                f"'{tool}' failed with exit code {process.returncode}: {error_output}",
                exit_code=process.returncode,
                stderr=error_output,
            )

        return stdout.decode("utf-8", errors="replace").strip()

    async def generate_sections(self, prompts: Iterable[str]) -> str:
        """Generate one section per prompt, strictly in order.

        Sections are joined with a blank line. Prompts are never run
        concurrently: later sections may build on earlier ones.
        """
        sections = []
        prompts = list(prompts)
        for index, prompt in enumerate(prompts, start=1):
            logger.info(f"Generating section {index}/{len(prompts)}")
            sections.append(await self.generate(prompt))
        return "\n\n".join(sections)

    @staticmethod
    def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
