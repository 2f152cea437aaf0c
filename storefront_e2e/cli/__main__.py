from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from storefront_e2e.config.loader import DEFAULT_CONFIG_PATH, ConfigError, SuiteConfig, load_config
from storefront_e2e.excel.errors import TransformError
from storefront_e2e.excel.reader import decode_workbook, read_records, resolve_header
from storefront_e2e.logging.error_log import ErrorLogBuffer, record_from_error
from storefront_e2e.logging.init import log_summary, setup_logging
from storefront_e2e.models.row_patch import RowPatch
from storefront_e2e.models.upload_type import UnknownOperationError, UploadType
from storefront_e2e.services.codes import generate_random_value
from storefront_e2e.services.fixtures import FixtureNotFoundError, load_fixture_bytes
from storefront_e2e.services.row_patcher import patch_workbook
from storefront_e2e.services.summary import render_summary_line
from storefront_e2e.services.upload import write_temp_workbook

"""CLI entrypoint: patch an upload fixture offline.

Runs the same fixture -> patch -> temp file pipeline as the upload step, without
a browser, so a fixture can be checked before a suite run:

    python -m storefront_e2e.cli --fixture code_decode.xlsx --operation update

Exit codes:
    0  patched workbook written
    1  fatal error (config, fixture, arguments, unwritable output path)
    2  the fixture could not be patched (details appended to logs/errors-*.log)
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_TRANSFORM_FAILED = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env so SUITE_EMAIL / SUITE_PASSWORD win over config/suite.yml."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Patch a Code/Decode upload fixture")
    p.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Suite config (YAML)")
    p.add_argument("--fixture", help="Fixture file name under fixtures_dir")
    p.add_argument("--operation", default="add", help="add | update | delete | 'new category'")
    p.add_argument("--code", help="CODE value (random when omitted)")
    p.add_argument("--decode", help="DECODE value (random when omitted)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg: SuiteConfig, fixture: str | None) -> int:
    directory = cfg.fixtures_dir
    if not directory.exists():
        print(f"inspect: directory not found: {directory}")
        return EXIT_FATAL
    if fixture:
        files = [directory / fixture]
    else:
        files = sorted(p for p in directory.iterdir() if p.suffix == ".xlsx")
    if not files:
        print("inspect: no .xlsx files")
        return EXIT_SUCCESS
    for f in files:
        print(f"FILE: {f.name}")
        if not f.is_file():
            print("  read_error: not found")
            continue
        try:
            sheet = decode_workbook(f.read_bytes())
            header = resolve_header(sheet.rows[0] if sheet.rows else [])
            records = read_records(sheet, header)
        except TransformError as e:
            print(f"  error={e}")
            continue
        print(f"  SHEET: {sheet.sheet_name} cols={list(header.names)} rows={len(records)}")
        print("    sample_rows=", [r.as_dict() for r in records[:INSPECT_SAMPLE_ROWS]])
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む (テストで main([]) を呼ぶため)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    if args.inspect_data:
        return _inspect_data(cfg, args.fixture)

    if not args.fixture:
        logger.error("--fixture is required")
        return EXIT_FATAL

    try:
        function = UploadType.from_operation(args.operation)
    except UnknownOperationError as e:
        logger.error(str(e))
        return EXIT_FATAL

    try:
        raw = load_fixture_bytes(cfg.fixtures_dir, args.fixture)
    except FixtureNotFoundError as e:
        logger.error(str(e))
        return EXIT_FATAL

    patch = RowPatch(
        code=args.code if args.code is not None else generate_random_value(),
        decode=args.decode if args.decode is not None else generate_random_value(),
        function=function,
    )
    logger.info(f"Patching fixture: {cfg.fixtures_dir / args.fixture}")

    started = time.perf_counter()
    try:
        result = patch_workbook(raw, patch)
    except TransformError as e:
        logger.error(f"patch: {e}")
        errors = ErrorLogBuffer()
        errors.append(record_from_error(args.fixture, e))
        log_path = errors.flush()
        logger.info(f"error log: {log_path}")
        return EXIT_TRANSFORM_FAILED

    try:
        output = write_temp_workbook(result.data, cfg.temp_file_path)
    except OSError as e:
        logger.error(f"output: cannot write {cfg.temp_file_path}: {e}")
        return EXIT_FATAL
    elapsed = time.perf_counter() - started

    summary_line = render_summary_line(args.fixture, patch, result, output, elapsed)
    # log_summary が "SUMMARY " を付けるので先頭を落とす
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
