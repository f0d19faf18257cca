import click
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich import box
from config.settings import settings
from cli.display import ConsoleDisplay
from core.questionnaire import QUESTIONS, current_choice
from models.assessment import (
    BackRequested, EntitySize, GovernanceMaturity, InfrastructureFlags,
    InfrastructureFlagsSubmitted, RestartRequested, ServiceSensitivity,
    SingleAnswerChosen, Step,
)
from services.session_service import SessionService

console = Console()

FLAG_NAMES = list(QUESTIONS[Step.DIGITAL_INFRASTRUCTURE]["flags"])
NAVIGATION = {"b": BackRequested, "r": RestartRequested}
QUIT = "q"


def banner():
    console.print(f"""
[bold blue]╔══════════════════════════════════════════════╗
║   NIS2 Exposure Advisor  v{settings.VERSION}              ║
║   Protocole d'exposition NIS2                ║
╚══════════════════════════════════════════════╝[/bold blue]
""")
    for w in settings.validate():
        console.print(f"  [yellow]⚠  {w}[/yellow]")
    console.print()


def parse_flags(text):
    """Turn '1,3' into InfrastructureFlags; '0' or empty input means nothing applies."""
    text = text.strip().lower()
    if text in NAVIGATION or text == QUIT:
        return text
    chosen = set()
    for part in text.replace(" ", ",").split(","):
        if not part or part == "0":
            continue
        if not part.isdigit() or not 1 <= int(part) <= len(FLAG_NAMES):
            raise click.BadParameter(f"'{part}' is not one of 0-{len(FLAG_NAMES)}, b, r or q")
        chosen.add(FLAG_NAMES[int(part) - 1])
    return InfrastructureFlags(**{name: name in chosen for name in FLAG_NAMES})


def write_pdf(service, session_id, organization):
    from reporting.pdf_report import PDFReportGenerator

    state = service.get_state(session_id)
    console.print("\n[bold]Generating PDF report...[/bold]")
    try:
        pdf_path = PDFReportGenerator(state.result, state.answers, organization).generate()
        console.print(f"\n[green]✔ Report saved:[/green] {pdf_path}\n")
    except OSError as e:
        logger.error(f"PDF generation failed: {e}")
        console.print(f"\n[red]✘ PDF generation failed:[/red] {e}\n")


@click.group()
def cli():
    """NIS2 Exposure Advisor — questionnaire CLI"""
    banner()


@cli.command("assess")
@click.option("--pdf", is_flag=True, default=False, help="Write a PDF report of the result")
@click.option("--organization", "-o", default=None, help="Organization name for the report")
def run_assessment(pdf, organization):
    """Answer the questionnaire interactively."""
    service = SessionService()
    service.subscribe(ConsoleDisplay(console))
    session_id = service.new_session()

    while True:
        state = service.get_state(session_id)
        step = state.current_step

        if step == Step.RESULTS:
            if pdf:
                write_pdf(service, session_id, organization)
            choice = click.prompt("[b] back  [r] restart  [q] quit",
                                  type=click.Choice(["b", "r", QUIT]),
                                  default=QUIT, show_choices=False)
        elif step == Step.DIGITAL_INFRASTRUCTURE:
            recorded = current_choice(step, state.answers)
            choice = click.prompt("Numbers that apply (e.g. 1,3; 0 = none)",
                                  default=recorded or "", value_proc=parse_flags,
                                  show_default=bool(recorded))
        else:
            options = list(QUESTIONS[step]["options"])
            numbers = [str(i) for i in range(1, len(options) + 1)]
            choice = click.prompt("Choice", type=click.Choice(numbers + list(NAVIGATION) + [QUIT]),
                                  default=current_choice(step, state.answers), show_choices=False)

        if isinstance(choice, InfrastructureFlags):
            service.apply(session_id, InfrastructureFlagsSubmitted(flags=choice))
        elif choice == QUIT:
            break
        elif choice in NAVIGATION:
            service.apply(session_id, NAVIGATION[choice]())
        else:
            value = options[int(choice) - 1].value
            service.apply(session_id, SingleAnswerChosen(step=step, value=value))

    service.end_session(session_id)


@cli.command("score")
@click.option("--size", required=True, type=click.Choice([e.value for e in EntitySize]))
@click.option("--sensitivity", required=True,
              type=click.Choice([e.value for e in ServiceSensitivity]))
@click.option("--cloud/--no-cloud", default=False, help="Data or apps hosted in the cloud")
@click.option("--mfa/--no-mfa", default=False, help="Multi-factor authentication enabled")
@click.option("--incident-process/--no-incident-process", default=False,
              help="Formal incident handling process")
@click.option("--supply-chain/--no-supply-chain", default=False,
              help="Dependence on critical IT suppliers")
@click.option("--governance", required=True,
              type=click.Choice([e.value for e in GovernanceMaturity]))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON")
@click.option("--pdf", is_flag=True, default=False, help="Write a PDF report of the result")
@click.option("--organization", "-o", default=None, help="Organization name for the report")
def score(size, sensitivity, cloud, mfa, incident_process, supply_chain, governance,
          as_json, pdf, organization):
    """Calculate the exposure tier from answers given as options."""
    service = SessionService()
    display = ConsoleDisplay(console)

    def show_result_only(view):
        if view.result is not None and not as_json:
            display.show_result(view.result)

    service.subscribe(show_result_only)
    session_id = service.new_session()

    flags = InfrastructureFlags(cloud=cloud, mfa=mfa, incident_process=incident_process,
                                supply_chain=supply_chain)
    service.apply(session_id, SingleAnswerChosen(step=Step.ENTITY_SIZE, value=size))
    service.apply(session_id, SingleAnswerChosen(step=Step.SERVICE_SENSITIVITY, value=sensitivity))
    service.apply(session_id, InfrastructureFlagsSubmitted(flags=flags))
    service.apply(session_id, SingleAnswerChosen(step=Step.GOVERNANCE_MATURITY, value=governance))

    result = service.current_result(session_id)
    if as_json:
        click.echo(result.model_dump_json(indent=2))
    if pdf:
        write_pdf(service, session_id, organization)
    service.end_session(session_id)


@cli.command("status")
def check_status():
    """Show configuration."""
    tbl = Table(box=box.ROUNDED, header_style="bold cyan")
    tbl.add_column("Component", style="bold")
    tbl.add_column("Status")
    tbl.add_column("Details")

    tbl.add_row("Environment", "[green]OK[/green]", settings.APP_ENV)
    tbl.add_row("Log Level", "[green]OK[/green]", settings.LOG_LEVEL)
    tbl.add_row("Report Output", "[green]OK[/green]", str(settings.REPORT_OUTPUT_DIR))
    if settings.ORGANIZATION_NAME:
        tbl.add_row("Organization", "[green]CONFIGURED[/green]", settings.ORGANIZATION_NAME)
    else:
        tbl.add_row("Organization", "[yellow]NOT SET[/yellow]", "Set ORGANIZATION_NAME in .env")
    console.print(tbl)
    console.print()
