"""Interactive CLI application."""
import logging
import sys
import time
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich.table import Table

from vocab_quiz.config import settings
from vocab_quiz.models import REQUEST_DIRECTIONS, QuizConfig
from vocab_quiz.quiz import InsufficientDataError, calculate_score, validate_config
from vocab_quiz.session import (
    current_question, end_session, get_progress, record_answer, skip_question,
    start_session,
)
from vocab_quiz.dashboard import (
    analyze_performance, calculate_streak, format_time, get_grade,
    get_motivational_message, get_performance_color, get_performance_emoji,
    get_random_consolation, get_random_encouragement,
)
from vocab_quiz.review import (
    generate_adaptive_questions, generate_study_plan, get_study_recommendations,
    recommend_difficulty,
)
from vocab_quiz.vocabulary import (
    filter_by_category, get_categories, load_entries, load_sample_entries,
)

console = Console()
logger = logging.getLogger(__name__)

EXIT_WORDS = ("q", "menu")
SKIP = "s"


class SessionExitRequested(Exception):
    """User typed q/menu in the middle of a quiz."""


def setup_logging(level: str = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def session_prompt(prompt: str, choices: list = None, **kwargs) -> str:
    if choices is not None:
        choices = list(choices) + list(EXIT_WORDS)
    answer = Prompt.ask(prompt, choices=choices, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def show_welcome():
    console.print(Panel(
        f"[bold]Baro Erayada[/bold] - Learn {settings.SOURCE_LANGUAGE} words\n"
        f"[dim]{settings.SOURCE_LANGUAGE} ↔ {settings.TARGET_LANGUAGE} vocabulary quiz[/dim]",
        title="Soo dhawoow / Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("quiz", "Practice quiz"),
        ("adaptive", "Drill missed and harder words"),
        ("stats", "Score, streak and suggested difficulty"),
        ("categories", "List word categories"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def run_quiz_session(session) -> None:
    """Ask each remaining question in ``session``; q/menu ends it early."""
    total = len(session.questions)
    console.print(f"\n[bold]Quiz[/bold] — {total} questions  [dim](s = skip, q = quit)[/dim]\n")
    question = current_question(session)
    while question is not None:
        number = len(session.results) + 1
        body = question.question + "\n\n" + "\n".join(
            f"  [cyan]{i})[/cyan] {option}" for i, option in enumerate(question.options, 1)
        )
        console.print(Panel(body, title=f"Q{number}/{total}", border_style="cyan"))
        started = time.monotonic()
        try:
            answer = session_prompt(
                "Your answer", choices=[str(i) for i in range(1, len(question.options) + 1)] + [SKIP],
            )
        except SessionExitRequested:
            end_session(session)
            raise
        elapsed = int((time.monotonic() - started) * 1000)
        if answer == SKIP:
            result = skip_question(session, elapsed)
        else:
            result = record_answer(session, question.options[int(answer) - 1], elapsed)

        if result.is_correct:
            console.print(f"[green]{get_random_encouragement()}[/green]")
        else:
            console.print(f"[red]{get_random_consolation()}[/red] Answer: [green]{result.correct_answer}[/green]")
        console.print(f"[dim]{get_progress(session):.0f}% done[/dim]\n")
        question = current_question(session)


def show_results(session, entries: list) -> None:
    performance = analyze_performance(session.results, entries)
    if not performance.total_questions:
        console.print("[yellow]No questions answered.[/yellow]")
        return
    color = get_performance_color(performance.accuracy)
    streak = calculate_streak(session.results)

    table = Table(title=f"Results {get_performance_emoji(performance.grade)}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Score", f"[{color}]{performance.accuracy}%[/{color}]")
    table.add_row("Grade", performance.grade)
    table.add_row("Correct", f"{performance.correct_answers}/{performance.total_questions}")
    table.add_row("Total time", format_time(performance.total_time))
    table.add_row("Average time", f"{performance.average_time}s")
    table.add_row("Longest streak", str(streak.longest))
    console.print(table)
    console.print(f"\n  [bold]{get_motivational_message(performance)}[/bold]")

    for label in performance.strengths:
        console.print(f"  [green]+ {label}[/green]")
    for label in performance.weaknesses:
        console.print(f"  [red]- {label}[/red]")

    console.print("\n[bold]Recommendations:[/bold]")
    for line in get_study_recommendations(session.results, entries):
        console.print(f"  • {line}")
    console.print("\n[bold]Study plan:[/bold]")
    for line in generate_study_plan(session.results, session.category_id or "all"):
        console.print(f"  • {line}")


def _play(session, entries: list, history: dict) -> None:
    try:
        run_quiz_session(session)
    except SessionExitRequested:
        console.print("[dim]Quiz stopped.[/dim]")
    history["results"].extend(session.results)
    if session.results:
        history["performances"].append(analyze_performance(session.results, entries))
    show_results(session, entries)


def cmd_quiz(entries: list, history: dict):
    console.print("\n[bold]Practice Quiz[/bold]")
    categories = get_categories(entries)
    category = Prompt.ask("Category", choices=["all"] + categories, default="all")
    pool = entries if category == "all" else filter_by_category(entries, category)
    config = QuizConfig(
        question_count=IntPrompt.ask("Number of questions", default=min(settings.DEFAULT_QUESTION_COUNT, len(pool))),
        time_per_question=settings.DEFAULT_TIME_PER_QUESTION,
        direction=Prompt.ask("Direction", choices=list(REQUEST_DIRECTIONS), default="mixed"),
    )
    if not validate_config(config, len(pool)):
        console.print(f"[red]Pick between 1 and {len(pool)} questions.[/red]")
        return
    try:
        session = start_session("" if category == "all" else category, pool, config)
    except InsufficientDataError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return
    _play(session, entries, history)


def cmd_adaptive(entries: list, history: dict):
    console.print("\n[bold]Adaptive Review[/bold]")
    count = IntPrompt.ask("Number of questions", default=settings.DEFAULT_QUESTION_COUNT)
    try:
        questions = generate_adaptive_questions(entries, history["results"], count)
    except InsufficientDataError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return
    session = start_session("adaptive", entries, questions=questions)
    _play(session, entries, history)


def cmd_stats(history: dict):
    results = history["results"]
    if not results:
        console.print("[yellow]No quizzes taken yet.[/yellow]")
        return
    score = calculate_score(results)
    streak = calculate_streak(results)
    console.print(Panel(
        f"Answers: [bold]{len(results)}[/bold]  |  Score: [bold]{score}%[/bold] ({get_grade(score)})\n"
        f"Current streak: [bold]{streak.current}[/bold] {streak.kind}  |  Longest: [bold]{streak.longest}[/bold]\n"
        f"Suggested difficulty: [bold]{recommend_difficulty(history['performances'])}[/bold]",
        title="Your Progress", border_style="blue",
    ))


def cmd_categories(entries: list):
    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Words", justify="right")
    for category in get_categories(entries):
        table.add_row(category, str(len(filter_by_category(entries, category))))
    console.print(table)


def main(argv: list = None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()
    if argv:
        path = Path(argv[0])
        if not path.exists():
            console.print(f"[red]File not found: {path}[/red]")
            return 1
        try:
            entries = load_entries(path)
        except (ValueError, KeyError) as e:
            console.print(f"[red]Could not load {path.name}: {e}[/red]")
            return 1
    else:
        entries = load_sample_entries()
    history = {"results": [], "performances": []}

    show_welcome()
    console.print(f"[dim]{len(entries)} words loaded[/dim]")

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="quiz").strip().lower()
        try:
            if choice == "quiz":
                cmd_quiz(entries, history)
            elif choice == "adaptive":
                cmd_adaptive(entries, history)
            elif choice == "stats":
                cmd_stats(history)
            elif choice == "categories":
                cmd_categories(entries)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Nabad gelyo! - Goodbye![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            logger.debug("Command %s failed", choice, exc_info=True)
            console.print(f"[red]Error: {e}[/red]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
