"""CLI 엔트리포인트."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from profile_lens.config import settings
from profile_lens.dashboard import DashboardSession
from profile_lens.exporter import export_report
from profile_lens.models import DerivedStatistics, Profile, RateLimit, RepositorySummary
from profile_lens.share import parse_share_url
from profile_lens.sources import GitHubProfileSource
from profile_lens.storage import FileTokenStore

console = Console()

app = typer.Typer(
    name="profile-lens",
    help="GitHub 사용자 프로필과 저장소 통계를 보여줍니다.",
    no_args_is_help=True,
)
token_app = typer.Typer(help="GitHub 토큰을 관리합니다.", no_args_is_help=True)
app.add_typer(token_app, name="token")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _token_store() -> FileTokenStore:
    return FileTokenStore(settings.token_file)


def _render_profile(profile: Profile, rate_limit: RateLimit | None) -> None:
    """프로필 패널을 출력한다."""
    lines = [f"[bold]{profile.name or profile.login}[/bold] [dim]@{profile.login}[/dim]"]
    if profile.bio:
        lines.append(profile.bio)
    lines.append("")
    lines.append(
        f"📦 {profile.public_repos:,} repos  "
        f"👥 {profile.followers:,} followers  "
        f"➡️  {profile.following:,} following"
    )

    details = []
    if profile.location:
        details.append(f"📍 {profile.location}")
    if profile.company:
        details.append(f"🏢 {profile.company}")
    if profile.blog:
        details.append(f"🔗 {profile.blog}")
    details.append(f"📅 {profile.created_at.strftime('%Y-%m-%d')}")
    lines.append("  ".join(details))

    subtitle = (
        f"API: {rate_limit.remaining}/{rate_limit.limit}" if rate_limit else None
    )
    console.print(
        Panel("\n".join(lines), title="GitHub Profile", subtitle=subtitle, border_style="blue")
    )


def _render_statistics(stats: DerivedStatistics) -> None:
    """통계 테이블을 출력한다."""
    table = Table(show_header=True, header_style="bold cyan", title="📊 통계")
    table.add_column("항목", style="bold")
    table.add_column("값", justify="right")

    table.add_row("⭐ 총 스타", f"{stats.total_stars:,}")
    table.add_row("🍴 총 포크", f"{stats.total_forks:,}")
    table.add_row("🐛 열린 이슈", f"{stats.total_issues:,}")
    table.add_row("💾 총 크기", f"{stats.total_size:,} KB")
    table.add_row("📈 저장소당 평균 스타", f"{stats.avg_stars_per_repo}")
    table.add_row("🔥 최근 한 달 활동", f"{stats.recent_activity}")
    if stats.most_starred_repo:
        repo = stats.most_starred_repo
        table.add_row(
            "🏆 인기 저장소",
            f"[link={repo.html_url}]{repo.name}[/link] ({repo.stargazers_count:,} ⭐)",
        )

    quality = stats.code_quality
    table.add_row("📝 설명 있는 저장소", f"{quality.has_description}")
    table.add_row("📜 라이선스 (추정)", f"{quality.has_license}")
    table.add_row("📦 평균 저장소 크기", f"{quality.avg_repo_size} KB")

    synthetic = stats.synthetic
    table.add_row("[dim]커밋 (시뮬레이션)[/dim]", f"[dim]{synthetic.commits_last_month}[/dim]")
    table.add_row("[dim]이슈 (시뮬레이션)[/dim]", f"[dim]{synthetic.issues_created}[/dim]")
    table.add_row("[dim]PR (시뮬레이션)[/dim]", f"[dim]{synthetic.pull_requests_opened}[/dim]")
    table.add_row(
        "[dim]연속 기여일 (시뮬레이션)[/dim]", f"[dim]{synthetic.contribution_streak}[/dim]"
    )

    console.print(table)

    if not stats.top_languages:
        return

    total = sum(stats.top_languages.values())
    lang_table = Table(show_header=True, header_style="bold cyan", title="💻 언어")
    lang_table.add_column("언어", style="bold")
    lang_table.add_column("저장소", justify="right")
    lang_table.add_column("비율", justify="right")
    lang_table.add_column("", width=25)

    for language, count in sorted(
        stats.top_languages.items(), key=lambda x: x[1], reverse=True
    ):
        percentage = count / total * 100
        bar_length = int(percentage / 100 * 20)
        lang_table.add_row(
            language,
            str(count),
            f"{percentage:.1f}%",
            "█" * bar_length + "░" * (20 - bar_length),
        )

    console.print(lang_table)


def _render_repositories(repositories: list[RepositorySummary]) -> None:
    """최근 저장소 테이블을 출력한다."""
    if not repositories:
        console.print("[yellow]공개 저장소가 없습니다.[/yellow]")
        return

    table = Table(
        show_header=True, header_style="bold cyan", expand=True, title="🕒 최근 저장소"
    )
    table.add_column("#", style="dim", width=3)
    table.add_column("저장소", style="bold")
    table.add_column("언어", width=12)
    table.add_column("⭐", justify="right", width=8)
    table.add_column("🍴", justify="right", width=8)
    table.add_column("업데이트", width=10)

    for i, repo in enumerate(repositories, 1):
        name = f"[link={repo.html_url}]{repo.name}[/link]"
        if repo.description:
            name += f"\n[dim]{repo.description[:80]}[/dim]"
        table.add_row(
            str(i),
            name,
            repo.language or "-",
            f"{repo.stargazers_count:,}",
            f"{repo.forks_count:,}",
            repo.updated_at.strftime("%Y-%m-%d"),
        )

    console.print(table)


def _render_session(session: DashboardSession) -> None:
    if session.profile is None or session.statistics is None:
        return
    console.print()
    _render_profile(session.profile, session.rate_limit)
    _render_statistics(session.statistics)
    _render_repositories(session.repositories)


async def _run(username: str, export_dir: Path | None, share: bool) -> None:
    """검색을 실행하고 결과를 출력한다."""
    token_store = _token_store()
    session = DashboardSession(GitHubProfileSource(token_store), token_store)

    with console.status(f"[bold]{username}[/bold] 조회 중..."):
        await session.search(username)

    if session.error is not None:
        console.print(f"[red]{session.error.message}[/red]")
        if session.error.suggests_token:
            console.print(
                "[dim]토큰 설정: [bold]profile-lens token set <TOKEN>[/bold][/dim]"
            )
        raise typer.Exit(1)

    _render_session(session)

    if share:
        url = session.share_url(settings.share_base_url)
        console.print(f"\n🔗 공유 링크: {url}")

    if export_dir is not None:
        report = session.report()
        if report is not None:
            path = export_report(report, export_dir)
            console.print(f"[green]✓[/green] 데이터 저장 완료: {path}")


def _execute(username: str, export_dir: Path | None, share: bool) -> None:
    try:
        asyncio.run(_run(username, export_dir, share))
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e


@app.command()
def search(
    username: Annotated[str, typer.Argument(help="GitHub username")],
    export: Annotated[
        Path | None,
        typer.Option("--export", "-e", help="결과 JSON을 저장할 디렉터리"),
    ] = None,
    share: Annotated[
        bool, typer.Option("--share", "-s", help="공유 링크를 출력한다")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="디버그 로그 출력")
    ] = False,
) -> None:
    """GitHub 사용자를 검색합니다."""
    _setup_logging(verbose)
    if not username.strip():
        console.print("[red]username을 입력하세요.[/red]")
        raise typer.Exit(1)
    _execute(username, export, share)


@app.command("open")
def open_link(
    url: Annotated[str, typer.Argument(help="`?user=` 파라미터가 있는 공유 링크")],
    export: Annotated[
        Path | None,
        typer.Option("--export", "-e", help="결과 JSON을 저장할 디렉터리"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="디버그 로그 출력")
    ] = False,
) -> None:
    """공유 링크의 사용자를 검색합니다."""
    _setup_logging(verbose)
    username = parse_share_url(url)
    if username is None:
        console.print("[red]링크에 user 파라미터가 없습니다.[/red]")
        raise typer.Exit(1)
    _execute(username, export, share=False)


@token_app.command("set")
def token_set(
    token: Annotated[str, typer.Argument(help="GitHub personal access token")],
) -> None:
    """GitHub 토큰을 저장합니다."""
    if not token.strip():
        console.print("[red]토큰이 비어 있습니다.[/red]")
        raise typer.Exit(1)
    _token_store().set(token)
    console.print("[green]✓[/green] GitHub 토큰이 저장되었습니다. 이제 더 많은 요청을 사용할 수 있습니다.")


@token_app.command("clear")
def token_clear() -> None:
    """저장된 GitHub 토큰을 삭제합니다."""
    _token_store().clear()
    console.print("[green]✓[/green] GitHub 토큰이 삭제되었습니다.")


@token_app.command("status")
def token_status() -> None:
    """토큰 설정 상태를 보여줍니다."""
    if settings.github_token:
        console.print("환경 변수 [bold]GITHUB_TOKEN[/bold] 사용 중")
    elif _token_store().get():
        console.print(f"저장된 토큰 사용 중 [dim]({settings.token_file})[/dim]")
    else:
        console.print("[yellow]토큰 없음[/yellow] [dim](시간당 60회 제한)[/dim]")


if __name__ == "__main__":
    app()
