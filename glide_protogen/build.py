# SPDX-License-Identifier: Apache-2.0
"""Decide once per build whether bindings are regenerated, then do it."""

from dataclasses import dataclass
from typing import Union

from typing_extensions import assert_never

from glide_protogen.config import (
    DEFAULT_POLICY,
    BuildSettings,
    CompilerInvocation,
    GenerationPolicy,
)
from glide_protogen.invoker import generate
from glide_protogen.logger import init_logger

logger = init_logger(__name__)


@dataclass(frozen=True)
class Skip:
    """Generation is disabled; bindings already on disk are used as is."""


@dataclass(frozen=True)
class Run:
    invocation: CompilerInvocation
    policy: GenerationPolicy = DEFAULT_POLICY


GenerationStep = Union[Skip, Run]


def plan_generation(
    settings: BuildSettings, policy: GenerationPolicy = DEFAULT_POLICY
) -> GenerationStep:
    if not settings.proto_enabled:
        return Skip()
    invocation = CompilerInvocation(
        include_directory=settings.include_directory,
        input_files=list(settings.schema_files),
        output_directory=settings.output_directory,
        compiler_path_override=settings.compiler_path_override,
    )
    return Run(invocation=invocation, policy=policy)


def run_step(step: GenerationStep) -> None:
    if isinstance(step, Skip):
        logger.info("Protobuf generation disabled; using bindings on disk")
    elif isinstance(step, Run):
        generate(step.invocation, step.policy)
    else:
        assert_never(step)
