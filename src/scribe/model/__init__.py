"""Core data models for Scribe."""

from .entities import (
    Artifact,
    BuildReport,
    CommitFooter,
    CommitMessage,
    Diagnostic,
    DiagnosticGroup,
    FunctionSignature,
    JsDocBlock,
    JsDocTag,
    RootCause,
    SkillDocument,
    SkillLink,
    SkillReference,
    SkillSection,
    sort_diagnostics,
)

__all__ = [
    "Artifact",
    "BuildReport",
    "CommitFooter",
    "CommitMessage",
    "Diagnostic",
    "DiagnosticGroup",
    "FunctionSignature",
    "JsDocBlock",
    "JsDocTag",
    "RootCause",
    "SkillDocument",
    "SkillLink",
    "SkillReference",
    "SkillSection",
    "sort_diagnostics",
]
