from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from core.questionnaire import INPUT_STEPS, QUESTIONS, current_choice
from core.tier_content import SECTION_TITLES
from models.assessment import AnswerRecord, Step, StepView, Tier, TierResult

TIER_COLORS = {Tier.TIER_1: "green", Tier.TIER_2: "orange3", Tier.TIER_3: "red"}


class ConsoleDisplay:
    """Renders every StepView published by the session service."""

    def __init__(self, console: Console):
        self.console = console

    def __call__(self, view: StepView):
        if view.current_step == Step.RESULTS:
            self.show_result(view.result)
        else:
            self.show_step(view.current_step, view.answers)

    def show_step(self, step: Step, answers: AnswerRecord = None):
        question = QUESTIONS[step]
        position = INPUT_STEPS.index(step) + 1
        chosen = current_choice(step, answers) if answers is not None else None
        selected = set(chosen.split(",")) if chosen else set()
        self.console.print(f"\n[bold blue]Étape {position}/{len(INPUT_STEPS)} — "
                           f"{question['title']}[/bold blue]")
        self.console.print(question["prompt"])
        entries = question["flags"].values() if "flags" in question else question["options"].values()
        for i, label in enumerate(entries, 1):
            marker = "[green]✔[/green]" if str(i) in selected else " "
            self.console.print(f"{marker} [cyan]{i}[/cyan]. {label}")
        self.console.print("  [dim]b = back, r = restart, q = quit[/dim]")

    def show_result(self, result: TierResult):
        color = TIER_COLORS.get(result.tier, "white")
        content = result.content
        self.console.print()
        self.console.print(f"[bold {color}]{content.label}[/bold {color}]")
        self.console.print(f"Score: {result.score}")

        b = result.breakdown
        tbl = Table(box=box.SIMPLE_HEAVY, header_style="bold cyan")
        tbl.add_column("Critère")
        tbl.add_column("Points", justify="right")
        tbl.add_row("Taille de l'entité", str(b.entity_size))
        tbl.add_row("Sensibilité des services", str(b.service_sensitivity))
        tbl.add_row("Infrastructure numérique", f"{b.infrastructure} / {b.infrastructure_raw}")
        tbl.add_row("Gouvernance", f"{b.governance:+d}")
        tbl.add_row("[bold]Total[/bold]", f"[bold]{result.score}[/bold]")
        self.console.print(tbl)

        obligations = "\n".join(f"• {o}" for o in content.obligations)
        self.console.print(Panel(
            f"[bold]{content.title}[/bold]\n\n"
            f"[bold]{SECTION_TITLES['implications']}[/bold]\n{content.implications}\n\n"
            f"[bold]{SECTION_TITLES['obligations']}[/bold]\n{obligations}\n\n"
            f"[bold]{SECTION_TITLES['timeline']}[/bold]\n{content.timeline}\n\n"
            f"[bold]{SECTION_TITLES['accountability']}[/bold]\n{content.accountability}\n\n"
            f"[bold]{SECTION_TITLES['positioning']}[/bold]\n{content.positioning}",
            border_style=color,
        ))
