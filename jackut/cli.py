#!/usr/bin/env python3
"""
Jackut CLI - ソーシャルネットワークサーバーの管理ツール
Typer を使用した管理・操作ツール
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from jackut import __version__
from jackut.adapters.storage.file import FileSnapshotAdapter
from jackut.core.config import get_settings
from jackut.domain.services.interaction import InteractionService

app = typer.Typer(
    name="jackut",
    help="Jackut - ソーシャルネットワークサーバー管理CLI",
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def _snapshot_storage() -> FileSnapshotAdapter:
    settings = get_settings()
    return FileSnapshotAdapter(
        data_dir=settings.data_dir,
        file_name=settings.storage.snapshot_file,
    )


@app.command()
def server(
    host: Optional[str] = typer.Option(None, help="サーバーのホストアドレス"),
    port: Optional[int] = typer.Option(None, help="サーバーのポート番号"),
    reload: bool = typer.Option(False, help="開発モードでの自動リロード")
):
    """
    FastAPI サーバーを起動します
    """
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(Panel(
        f"[bold blue]Jackut API Server[/bold blue]\n"
        f"🚀 起動中: http://{host}:{port}\n"
        f"📚 ドキュメント: http://{host}:{port}/docs",
        title="サーバー起動"
    ))

    import uvicorn

    uvicorn.run(
        "jackut.api.main:app",
        host=host,
        port=port,
        reload=reload,
        access_log=True
    )


@app.command()
def stats():
    """
    保存済みスナップショットのアカウント・コミュニティ一覧を表示
    """
    storage = _snapshot_storage()
    if storage.load() is None:
        console.print(f"[yellow]スナップショットがありません: {storage.data_file}[/yellow]")
        raise typer.Exit(1)

    service = InteractionService(storage=storage)
    network = service.network

    accounts = Table(title="アカウント", show_header=True, header_style="bold magenta")
    accounts.add_column("ログイン", style="cyan")
    accounts.add_column("名前", style="white")
    accounts.add_column("友人", justify="right", style="yellow")
    accounts.add_column("未読", justify="right", style="yellow")
    for account in network.directory:
        accounts.add_row(
            account.account_id,
            account.name,
            str(len(network.graph.friends_of(account.account_id))),
            str(network.mailbox.pending_count(account.account_id)),
        )
    console.print(accounts)

    communities = Table(title="コミュニティ", show_header=True, header_style="bold magenta")
    communities.add_column("名前", style="cyan")
    communities.add_column("オーナー", style="white")
    communities.add_column("メンバー", justify="right", style="yellow")
    for community in network.communities.all():
        communities.add_row(community.name, community.owner, str(len(community.members)))
    console.print(communities)


@app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="確認をスキップ")
):
    """
    スナップショットを削除して全データを消去
    """
    storage = _snapshot_storage()
    if not yes and not typer.confirm(f"{storage.data_file} を削除しますか？"):
        raise typer.Exit(1)
    storage.clear()
    console.print("[green]全データを消去しました[/green]")


@app.command()
def version():
    """
    バージョン情報を表示
    """
    console.print(Panel(
        f"[bold blue]Jackut CLI[/bold blue] v{__version__}\n"
        f"🔧 Built with [bold]Typer[/bold]\n"
        f"🚀 Powered by [bold]FastAPI[/bold]",
        title="バージョン情報"
    ))


if __name__ == "__main__":
    app()
