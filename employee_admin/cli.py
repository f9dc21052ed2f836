from __future__ import annotations

import logging
import sqlite3
import time
import uuid
from pathlib import Path

import typer

from employee_admin.common.sanitize import maskSecret
from employee_admin.common.time import getDurationMs
from employee_admin.config import Settings, load_settings
from employee_admin.domain.mappers.employee_converter import to_presentation_list
from employee_admin.domain.messages import MessageCatalog
from employee_admin.errors import AppError
from employee_admin.infra.logging.setup import closeCommandLogger, createCommandLogger, logEvent
from employee_admin.infra.messages_loader import load_message_catalog
from employee_admin.infra.sources.csv_utils import CsvFormatError
from employee_admin.infra.sources.employee_csv_reader import EmployeeCsvSource
from employee_admin.infra.store.db import ensure_schema, openEmployeeDb
from employee_admin.infra.store.employee_repository import SqliteEmployeeRepository
from employee_admin.usecases.register_usecase import RegisterEmployeesUseCase
from employee_admin.usecases.results import RunResult
from employee_admin.usecases.update_usecase import UpdateEmployeesUseCase
from employee_admin.usecases.validate_usecase import ValidateUseCase

app = typer.Typer(no_args_is_help=True, add_completion=False)


def requireCsv(csvPath: str | None) -> None:
    """
    Назначение:
        Проверка наличия CSV-файла для validate/register/update.

    Поведение:
        - Если csvPath не задан или файл не существует: exit code 2.
    """
    if not csvPath:
        typer.echo("ERROR: --csv is required", err=True)
        raise typer.Exit(code=2)

    p = Path(csvPath)
    if not p.exists() or not p.is_file():
        typer.echo(f"ERROR: CSV file not found: {csvPath}", err=True)
        raise typer.Exit(code=2)


def printRunResult(result: RunResult) -> None:
    for failure in result.failures:
        messages = "; ".join(item.message for item in failure.errors)
        typer.echo(f"line={failure.line_no} code={failure.employee_code} errors={messages}")
    typer.echo(f"total={result.total} succeeded={result.succeeded} failed={result.failed}")


def runCommand(ctx: typer.Context, commandName: str, csvPath: str | None, requiresCsv: bool, runner) -> None:
    """
    Назначение:
        Общая обвязка команд:
        - создаёт логгер + файл лога
        - проверяет CSV
        - открывает БД сотрудников и гарантирует схему
        - переводит ошибки входа/хранилища в exit code 2

    Входные данные:
        runner: Callable[[logger, SqliteEmployeeRepository], int]
    """
    runId = ctx.obj["runId"]
    settings: Settings = ctx.obj["settings"]

    startMonotonic = time.monotonic()
    logger, logFilePath = createCommandLogger(
        commandName=commandName,
        logDir=settings.log_dir,
        runId=runId,
        logLevel=settings.log_level,
    )
    exitCode = 0
    try:
        logEvent(logger, logging.INFO, runId, "core", f"Command started sources={ctx.obj['sources']}")

        if requiresCsv:
            try:
                requireCsv(csvPath)
            except typer.Exit:
                logEvent(logger, logging.ERROR, runId, "csv", "CSV is missing or not accessible")
                exitCode = 2
                return

        try:
            conn = openEmployeeDb(settings.db_path)
        except sqlite3.Error as exc:
            logEvent(logger, logging.ERROR, runId, "store", f"Failed to open employee DB: {exc}")
            typer.echo("ERROR: failed to open employee DB (see logs)", err=True)
            exitCode = 2
            return

        try:
            ensure_schema(conn)
            exitCode = runner(logger, SqliteEmployeeRepository(conn))
        except CsvFormatError as exc:
            logEvent(logger, logging.ERROR, runId, "csv", f"CSV format error: {exc}")
            typer.echo(f"ERROR: CSV format error: {exc}", err=True)
            exitCode = 2
        except OSError as exc:
            logEvent(logger, logging.ERROR, runId, "csv", f"CSV read error: {exc}")
            typer.echo(f"ERROR: CSV read error: {exc}", err=True)
            exitCode = 2
        except AppError as exc:
            logEvent(logger, logging.ERROR, runId, exc.category, f"Command failed error={exc.to_dict()}")
            typer.echo(f"ERROR: {exc.code}: {exc.message}", err=True)
            exitCode = 2
        finally:
            conn.close()
    finally:
        durationMs = getDurationMs(startMonotonic, time.monotonic())
        logEvent(logger, logging.INFO, runId, "core", f"Command finished exit_code={exitCode} duration_ms={durationMs}")
        closeCommandLogger(logger)
        typer.echo(f"run_id={runId} log_file={logFilePath}")
        if exitCode:
            raise typer.Exit(code=exitCode)


@app.callback()
def main(
    ctx: typer.Context,
    config: str | None = typer.Option(None, "--config", help="Path to config.yml"),
    runId: str | None = typer.Option(None, "--run-id", help="Run identifier (UUID). If omitted, generated."),
    logLevel: str | None = typer.Option(None, "--log-level", help="Log level: ERROR|WARN|INFO|DEBUG"),
    logDir: str | None = typer.Option(None, "--log-dir", help="Directory for logs."),
    dbPath: str | None = typer.Option(None, "--db-path", help="Path to the employee SQLite DB."),
    messagesFile: str | None = typer.Option(None, "--messages-file", help="YAML file with error messages."),
    csvHasHeader: bool | None = typer.Option(None, "--csv-has-header/--csv-no-header", help="CSV includes header row"),
):
    """
    Назначение:
        Глобальная инициализация CLI:
        - генерирует/принимает run_id
        - загружает настройки (CLI > ENV > config > defaults)
        - один раз загружает справочник сообщений
        - сохраняет всё в ctx.obj для подкоманд
    """
    if not runId:
        runId = str(uuid.uuid4())

    cliOverrides = {
        "db_path": dbPath,
        "log_dir": logDir,
        "log_level": logLevel,
        "messages_file": messagesFile,
        "csv_has_header": csvHasHeader,
    }
    try:
        loaded = load_settings(config_path=config, cli_overrides=cliOverrides)
        catalog = load_message_catalog(loaded.settings.messages_file)
    except (ValueError, AppError) as exc:
        typer.echo(f"ERROR: invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2)

    Path(loaded.settings.log_dir).mkdir(parents=True, exist_ok=True)

    ctx.obj = {
        "runId": runId,
        "settings": loaded.settings,
        "sources": loaded.sources_used,
        "catalog": catalog,
    }


@app.command()
def validate(
    ctx: typer.Context,
    csv: str | None = typer.Option(None, "--csv", help="Path to employees CSV"),
    checkCodeDuplicate: bool = typer.Option(
        True, "--check-code-duplicate/--no-check-code-duplicate", help="Check code against stored employees"
    ),
    checkPassword: bool = typer.Option(True, "--check-password/--no-check-password", help="Require a password"),
):
    """Validate employees from CSV without storing them."""
    settings: Settings = ctx.obj["settings"]
    catalog: MessageCatalog = ctx.obj["catalog"]

    def execute(logger, repository) -> int:
        usecase = ValidateUseCase(repository, catalog, checkCodeDuplicate, checkPassword)
        result = usecase.run(EmployeeCsvSource(csv, settings.csv_has_header), logger, ctx.obj["runId"])
        printRunResult(result)
        return 0 if result.ok else 1

    runCommand(ctx, "validate", csv, True, execute)


@app.command()
def register(
    ctx: typer.Context,
    csv: str | None = typer.Option(None, "--csv", help="Path to employees CSV"),
):
    """Validate and store new employees from CSV."""
    settings: Settings = ctx.obj["settings"]
    catalog: MessageCatalog = ctx.obj["catalog"]

    def execute(logger, repository) -> int:
        usecase = RegisterEmployeesUseCase(repository, catalog)
        result = usecase.run(EmployeeCsvSource(csv, settings.csv_has_header), logger, ctx.obj["runId"])
        printRunResult(result)
        return 0 if result.ok else 1

    runCommand(ctx, "register", csv, True, execute)


@app.command()
def update(
    ctx: typer.Context,
    csv: str | None = typer.Option(None, "--csv", help="Path to employees CSV (id column required)"),
):
    """Validate and update stored employees by id."""
    settings: Settings = ctx.obj["settings"]
    catalog: MessageCatalog = ctx.obj["catalog"]

    def execute(logger, repository) -> int:
        usecase = UpdateEmployeesUseCase(repository, catalog)
        result = usecase.run(EmployeeCsvSource(csv, settings.csv_has_header), logger, ctx.obj["runId"])
        printRunResult(result)
        return 0 if result.ok else 1

    runCommand(ctx, "update", csv, True, execute)


@app.command("list")
def listEmployees(
    ctx: typer.Context,
    includeDeleted: bool = typer.Option(True, "--include-deleted/--exclude-deleted", help="Show deleted employees"),
):
    """Print stored employees in presentation form (passwords masked)."""

    def execute(logger, repository) -> int:
        views = to_presentation_list(repository.list_all(include_deleted=includeDeleted))
        for view in views:
            typer.echo(
                f"id={view.id} code={view.code} name={view.name} password={maskSecret(view.password)} "
                f"admin_flag={_fmt_flag(view.admin_flag)} delete_flag={_fmt_flag(view.delete_flag)}"
            )
        logEvent(logger, logging.INFO, ctx.obj["runId"], "list", f"employees listed count={len(views)}")
        return 0

    runCommand(ctx, "list", None, False, execute)


def _fmt_flag(value: int | None) -> str:
    return "null" if value is None else str(int(value))


if __name__ == "__main__":
    app()
