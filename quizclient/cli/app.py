"""Typer CLI application for the quiz client."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from quizclient.config.settings import get_settings
from quizclient.models.quiz import QuestionDifficulty, QuizData
from quizclient.services.errors import QuizServiceError
from quizclient.services.quiz_service import QuizService, parse_quiz_payload
from quizclient.services.scoring import grade_answers
from quizclient.utils.logging_config import configure_logging

app = typer.Typer(
    name="quiz-client",
    help="Request, validate and play AI generated quizzes",
    add_completion=False,
)

console = Console()

TOPIC_OPTION = typer.Option(..., "--topic", "-t", help="Quiz topic")
QUESTIONS_OPTION = typer.Option(
    None,
    "--questions",
    "-q",
    help="Number of questions (defaults to QUIZ_DEFAULT_QUESTIONS)",
    min=1,
    max=50,
)
DIFFICULTY_OPTION = typer.Option(
    QuestionDifficulty.MEDIUM,
    "--difficulty",
    "-d",
    help="Difficulty level",
    case_sensitive=False,
)
BASE_URL_OPTION = typer.Option(
    None,
    "--base-url",
    help="Backend base URL (defaults to QUIZ_API_BASE_URL)",
)


@app.command()
def generate(
    topic: str = TOPIC_OPTION,
    questions: Optional[int] = QUESTIONS_OPTION,
    difficulty: QuestionDifficulty = DIFFICULTY_OPTION,
    base_url: Optional[str] = BASE_URL_OPTION,
    show_answers: bool = typer.Option(
        False,
        "--show-answers/--hide-answers",
        help="Mark the correct option of each question",
    ),
) -> None:
    """
    Request a quiz from the backend and print it.

    Example:
        quiz-client generate -t "World War II" -q 5 -d medium
    """
    quiz = fetch_quiz(topic, questions, difficulty, base_url)
    display_quiz(quiz, show_answers)


@app.command()
def parse(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="File containing a quiz payload",
    ),
    show_answers: bool = typer.Option(
        True,
        "--show-answers/--hide-answers",
        help="Mark the correct option of each question",
    ),
) -> None:
    """Validate a saved quiz payload and print it."""
    try:
        quiz = parse_quiz_payload(path.read_text(encoding="utf-8"))
    except QuizServiceError as e:
        report_error(e)
        raise typer.Exit(code=1)

    display_quiz(quiz, show_answers)


@app.command()
def play(
    topic: str = TOPIC_OPTION,
    questions: Optional[int] = QUESTIONS_OPTION,
    difficulty: QuestionDifficulty = DIFFICULTY_OPTION,
    base_url: Optional[str] = BASE_URL_OPTION,
) -> None:
    """Request a quiz and answer it in the terminal."""
    quiz = fetch_quiz(topic, questions, difficulty, base_url)

    selections: list[Optional[int]] = []
    for number, question in enumerate(quiz.questions, start=1):
        console.print(f"\n[bold cyan]Question {number}/{quiz.total_questions}[/bold cyan]")
        console.print(escape(question.prompt))
        for option_number, option in enumerate(question.options, start=1):
            console.print(f"  {option_number}. {escape(option)}")

        while True:
            answer = typer.prompt("Your answer (0 to skip)", type=int)
            if 0 <= answer <= len(question.options):
                break
            console.print(f"[red]Pick a number between 0 and {len(question.options)}.[/red]")
        selections.append(answer - 1 if answer else None)

    result = grade_answers(quiz, selections)
    display_answers(quiz, selections)
    console.print(f"\n[bold green]{result.summary()}[/bold green]")


@app.command()
def info() -> None:
    """Display information about the quiz client."""
    settings = get_settings()
    info_text = f"""
[bold cyan]Quiz Client[/bold cyan]
Version: 0.1.0

[bold]Backend:[/bold] {settings.generate_url}
[bold]Connect timeout:[/bold] {settings.connect_timeout_seconds:g}s

[bold]Pipeline:[/bold]
  • Request encoder - builds the generate request body
  • JSON parser - turns the response into a value tree
  • Schema mapper - validates questions, options and answer indexes
    """
    console.print(Panel(info_text, title="Quiz Client Info", border_style="cyan"))


def fetch_quiz(
    topic: str,
    questions: Optional[int],
    difficulty: QuestionDifficulty,
    base_url: Optional[str],
) -> QuizData:
    """Request a quiz with a spinner, exiting with code 1 on any failure."""
    question_count = questions or get_settings().default_question_count
    display_config(topic, question_count, difficulty)

    try:
        with QuizService(base_url=base_url) as service, Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("[cyan]Generating quiz...", total=None)
            return service.request_quiz(topic, question_count, difficulty.value)
    except QuizServiceError as e:
        report_error(e)
        raise typer.Exit(code=1)


def report_error(error: QuizServiceError) -> None:
    """Print a quiz service failure with its category."""
    console.print(
        f"[red]Error ({error.category.value}):[/red] {escape(str(error))}",
        style="bold",
    )


def display_config(
    topic: str,
    question_count: int,
    difficulty: QuestionDifficulty,
) -> None:
    """Display the request before it is sent."""
    table = Table(title="Quiz Request", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Topic", escape(topic))
    table.add_row("Questions", str(question_count))
    table.add_row("Difficulty", difficulty.value.capitalize())

    console.print()
    console.print(table)


def display_quiz(quiz: QuizData, show_answers: bool = False) -> None:
    """Display a validated quiz."""
    summary = Table(title="Quiz Summary", border_style="green")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="white")

    if quiz.quiz_id:
        summary.add_row("Quiz ID", escape(quiz.quiz_id))
    summary.add_row("Topic", escape(quiz.topic) or "-")
    summary.add_row("Difficulty", escape(quiz.difficulty.capitalize()))
    summary.add_row("Questions", str(quiz.total_questions))
    if quiz.question_count != quiz.total_questions:
        summary.add_row("Reported count", f"[yellow]{quiz.question_count}[/yellow]")

    console.print()
    console.print(summary)

    questions_table = Table(title="Questions", border_style="cyan", show_lines=True)
    questions_table.add_column("#", style="cyan")
    questions_table.add_column("Question", style="white")
    questions_table.add_column("Options", style="white")

    for number, question in enumerate(quiz.questions, start=1):
        options = []
        for index, option in enumerate(question.options):
            if show_answers and index == question.correct_index:
                options.append(f"[green]{index + 1}. {escape(option)} ✓[/green]")
            else:
                options.append(f"{index + 1}. {escape(option)}")
        questions_table.add_row(str(number), escape(question.prompt), "\n".join(options))

    console.print()
    console.print(questions_table)


def display_answers(quiz: QuizData, selections: list[Optional[int]]) -> None:
    """Display each question's selected and correct option."""
    table = Table(title="Your Answers", border_style="cyan")
    table.add_column("#", style="cyan")
    table.add_column("Your answer", style="white")
    table.add_column("Correct answer", style="white")

    for number, (question, selection) in enumerate(zip(quiz.questions, selections), start=1):
        if selection is None:
            chosen = "[yellow]skipped[/yellow]"
        elif question.is_correct(selection):
            chosen = f"[green]{escape(question.options[selection])}[/green]"
        else:
            chosen = f"[red]{escape(question.options[selection])}[/red]"
        table.add_row(str(number), chosen, escape(question.correct_option))

    console.print()
    console.print(table)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Quiz Client - request and validate quizzes from the generation backend.
    """
    configure_logging(logging.DEBUG if verbose else get_settings().log_level)


if __name__ == "__main__":
    app()
