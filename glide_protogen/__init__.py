# SPDX-License-Identifier: Apache-2.0
from glide_protogen.build import GenerationStep, Run, Skip, plan_generation, run_step
from glide_protogen.compiler import ResolvedCompiler, resolve_compiler
from glide_protogen.config import (
    DEFAULT_POLICY,
    BuildSettings,
    CompilerInvocation,
    GenerationPolicy,
)
from glide_protogen.exceptions import (
    CompilerNotFound,
    GenerationError,
    OutputWriteError,
    SchemaSyntaxError,
)
from glide_protogen.invoker import generate

__all__ = [
    "BuildSettings",
    "CompilerInvocation",
    "CompilerNotFound",
    "DEFAULT_POLICY",
    "GenerationError",
    "GenerationPolicy",
    "GenerationStep",
    "OutputWriteError",
    "ResolvedCompiler",
    "Run",
    "SchemaSyntaxError",
    "Skip",
    "generate",
    "plan_generation",
    "resolve_compiler",
    "run_step",
]
