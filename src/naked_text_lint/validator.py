"""Publishing naked text findings as diagnostics."""

import logging

from naked_text_lint.config import NakedTextLintConfig
from naked_text_lint.diagnostics import DiagnosticSink
from naked_text_lint.extractor import extract_all_naked_texts
from naked_text_lint.models import Diagnostic, NakedText, SourceDocument
from naked_text_lint.parser import ScriptKind

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = 'Text string "{text}" must be rendered within a <{component}> component'


def to_diagnostic(naked_text: NakedText, config: NakedTextLintConfig) -> Diagnostic:
    """Map a finding to the diagnostic shown for it."""
    return Diagnostic(
        range=naked_text.range,
        message=MESSAGE_TEMPLATE.format(
            text=naked_text.text, component=config.primary_text_component
        ),
        severity=config.severity,
    )


def start_validating(
    document: SourceDocument,
    script_kind: ScriptKind,
    sink: DiagnosticSink,
    config: NakedTextLintConfig | None = None,
) -> None:
    """Scan a document and publish its diagnostics.

    The published list always replaces the previous one for the document,
    so an empty scan clears stale warnings. Callers must serialise scans of
    the same document.

    Args:
        document: Document to scan
        script_kind: Grammar variant to parse the document as
        sink: Destination for the diagnostics, keyed by ``document.uri``
        config: Scan configuration (defaults apply if None)

    Raises:
        UnsupportedScriptKindError: If the script kind is not supported

    """
    config = config or NakedTextLintConfig()
    naked_texts = extract_all_naked_texts(document.text, script_kind, config)
    diagnostics = [to_diagnostic(naked_text, config) for naked_text in naked_texts]

    sink.set(document.uri, diagnostics)
    logger.debug("Published %d diagnostic(s) for %s", len(diagnostics), document.uri)
