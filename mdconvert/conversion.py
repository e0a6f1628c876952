"""
Selection conversion pipeline.

Reads the selected Markdown from a host document, replaces it with styled blocks,
and reports a single status message. The host is synchronized after the selection
is read, after it is deleted, and once more after every block was queued.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from core.errors import EmptySelectionError, HostOperationError, MarkdownFormatterError, format_error
from mdconvert.applier import FormattingApplier
from mdconvert.cursor import Cursor
from mdconvert.host import DELETE_MODE_SELECT, HostDocument
from mdconvert.markdown_parser import parse_markdown, trim_line

logger = logging.getLogger(__name__)

StatusSink = Callable[[str], None]

SUCCESS_MESSAGE = "Markdown conversion completed successfully ({count} blocks inserted)."


@dataclass
class ConversionResult:
    """Outcome of one conversion, as reported to the user.

    Attributes:
        success: True when every block was inserted and committed.
        message: The status message sent to the sink.
        blocks_inserted: Number of blocks queued by the applier.
        error: The error that stopped the conversion, if any.
    """

    success: bool
    message: str
    blocks_inserted: int = 0
    error: MarkdownFormatterError | None = None


async def run_conversion(host: HostDocument) -> int:
    """
    Replace the host's selected Markdown with formatted blocks.

    Errors raised by the host are expected to be project errors already; anything
    else is wrapped in a HostOperationError.

    Args:
        host: The document to read from and write into.

    Returns:
        The number of blocks inserted.

    Raises:
        EmptySelectionError: If the selection is blank. Nothing was changed.
        HostOperationError: If a host call failed. Blocks queued before the
            failure are still committed.
    """
    try:
        return await _convert(host)
    except MarkdownFormatterError:
        raise
    except Exception as e:
        message = f"An unexpected error occurred in convert_selection: {e}"
        logger.exception(message)
        raise HostOperationError(message) from e


async def _convert(host: HostDocument) -> int:
    markdown_text = await host.get_selection_text()
    if not trim_line(markdown_text):
        logger.info("[convert_selection] Selection is empty, nothing to convert")
        raise EmptySelectionError()

    elements = parse_markdown(markdown_text)
    logger.info(f"[convert_selection] Parsed {len(elements)} element(s)")

    host.delete_selection(DELETE_MODE_SELECT)
    await host.synchronize()

    cursor = Cursor(host.selection_anchor())
    try:
        inserted = FormattingApplier(host).apply(elements, cursor)
    except Exception:
        # Commit the blocks queued before the failing element, but report the element error
        try:
            await host.synchronize()
        except Exception as sync_error:
            logger.error(f"[convert_selection] Could not commit blocks before the failure: {sync_error}")
        raise
    await host.synchronize()

    logger.info(f"[convert_selection] Committed {inserted} block(s), cursor moved {cursor.moves} time(s)")
    return inserted


async def convert_selection(host: HostDocument, status_sink: StatusSink | None = None) -> ConversionResult:
    """
    Run the conversion and report its outcome exactly once.

    Conversion failures are not raised; they are turned into a failure message.

    Args:
        host: The document to convert the selection of.
        status_sink: Optional callback receiving the status message.

    Returns:
        The conversion result.
    """
    try:
        inserted = await run_conversion(host)
        result = ConversionResult(success=True, message=SUCCESS_MESSAGE.format(count=inserted), blocks_inserted=inserted)
    except EmptySelectionError as e:
        result = ConversionResult(success=False, message=str(e), error=e)
    except MarkdownFormatterError as e:
        logger.error(f"[convert_selection] Conversion failed: {e}")
        result = ConversionResult(success=False, message=format_error("Conversion", e), error=e)

    if status_sink is not None:
        status_sink(result.message)
    return result
