from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

console = Console()

class ScannerUI:
    def __init__(self, console_instance=None):
        self.console = console_instance or console

    def display_welcome(self):
        self.console.rule("[bold red]PORTHAWK - Simple and fast port scanner[/bold red]")

    def display_config(self, config):
        """
        Shows the resolved scan plan before (or instead of) running it.
        """
        self.console.print(Panel.fit(f"[bold green]Scan plan for {config.address}[/bold green]", border_style="blue"))

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        port_count = len(config.ports)
        table.add_row("Address", str(config.address))
        table.add_row("Ports", str(config.ports))
        table.add_row("Port count", f"{port_count} port{'s' if port_count != 1 else ''}")
        table.add_row("Threads", str(config.threads))
        table.add_row("Timeout", f"{config.timeout} ms")
        table.add_row("Output", escape(str(config.output)) if config.output else "N/A")

        self.console.print(table)

    def show_message(self, msg, style="bold red"):
        self.console.print(f"[{style}]{escape(str(msg))}[/{style}]")
