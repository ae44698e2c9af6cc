"""
Ollama embedding client for ResumeForge.

Turns resume and job description text into vectors for semantic matching.
When the server or model is unavailable every call degrades to None or False
so the analyzers can fall back to lexical similarity.
"""

import time
from typing import Any, Dict, List, Optional

import numpy as np
import ollama
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import get_config_manager

console = Console()

# nomic-embed-text handles roughly 8k tokens, far more than a long resume
MAX_EMBEDDING_CHARS = 30000
RETRY_DELAY_SECONDS = 0.5


class OllamaEmbeddingClient:
    """Embeds resumes and job descriptions with a local Ollama server."""

    def __init__(self,
                 host: Optional[str] = None,
                 model: Optional[str] = None,
                 timeout: Optional[int] = None,
                 max_retries: Optional[int] = None,
                 retry_delay: float = RETRY_DELAY_SECONDS):
        config = get_config_manager()

        if host is None:
            host = f"http://{config.get('ollama', 'host')}:{config.get('ollama', 'port')}"
        if model is None:
            model = config.get('ollama', 'model')
        if timeout is None:
            timeout = config.get('ollama', 'timeout')
        if max_retries is None:
            max_retries = config.get('ollama', 'max_retries')

        self.host = host
        self.model = model
        self.timeout = timeout
        self.max_retries = max(1, int(max_retries or 1))
        self.retry_delay = retry_delay
        self.client = ollama.Client(host=host, timeout=timeout)
        self._model_ready = None

    def test_connection(self) -> bool:
        """Check that the Ollama server answers before any resume is embedded."""
        try:
            self.client.list()
            return True
        except Exception as e:
            console.print(f"[red]Cannot reach Ollama at {self.host}: {e}[/red]")
            return False

    def _available_models(self) -> List[Any]:
        models = self.client.list()
        return list(models.get('models', []) or [])

    @staticmethod
    def _model_name(model: Any) -> str:
        return model.get('name') or model.get('model') or ''

    def _matches_model(self, name: str) -> bool:
        return name == self.model or name == f"{self.model}:latest"

    def ensure_model_ready(self) -> bool:
        """
        Make sure the embedding model is installed, pulling it on first use.

        The result is remembered, so a failed pull is not retried for every
        resume in a batch.
        """
        if self._model_ready is not None:
            return self._model_ready

        try:
            if any(self._matches_model(self._model_name(m)) for m in self._available_models()):
                self._model_ready = True
                console.print(f"[green]✓ Embedding model {self.model} is ready[/green]")
                return True

            console.print(f"[yellow]Pulling embedding model {self.model}... This may take a while.[/yellow]")

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
            ) as progress:
                task = progress.add_task(f"Downloading {self.model}", total=None)

                try:
                    self.client.pull(self.model)
                    progress.update(task, description="Model downloaded successfully")
                    self._model_ready = True
                    console.print(f"[green]✓ Embedding model {self.model} is now ready[/green]")
                    return True
                except Exception as e:
                    progress.update(task, description=f"Failed to download model: {e}")
                    self._model_ready = False
                    return False

        except Exception as e:
            console.print(f"[red]Error checking embedding model availability: {e}[/red]")
            self._model_ready = False
            return False

    def generate_embedding(self, text: str) -> Optional[np.ndarray]:
        """
        Embed one resume or job description.

        Server errors are retried up to max_retries times with a linearly
        growing delay.

        Args:
            text: Document text; whitespace is collapsed before embedding

        Returns:
            float32 vector, or None when the text is empty or the server fails
        """
        if not self.ensure_model_ready():
            return None

        cleaned_text = self._prepare_text(text)
        if not cleaned_text.strip():
            console.print("[yellow]Warning: Document has no text to embed[/yellow]")
            return None

        for attempt in range(1, self.max_retries + 1):
            try:
                response = self.client.embeddings(model=self.model, prompt=cleaned_text)
                embedding = response.get('embedding')
                if embedding:
                    return np.array(embedding, dtype=np.float32)
                console.print("[red]Ollama returned no embedding for the document[/red]")
                return None
            except Exception as e:
                if attempt == self.max_retries:
                    console.print(f"[red]Error embedding document: {e}[/red]")
                    return None
                console.print(f"[yellow]Embedding attempt {attempt} failed, retrying: {e}[/yellow]")
                time.sleep(self.retry_delay * attempt)

        return None

    def generate_embeddings_batch(self, texts: List[str],
                                  show_progress: bool = True) -> List[Optional[np.ndarray]]:
        """Embed several documents, showing a progress bar for more than one."""
        if not self.ensure_model_ready():
            return [None] * len(texts)

        embeddings = []

        if show_progress and len(texts) > 1:
            with Progress() as progress:
                task = progress.add_task("Embedding documents...", total=len(texts))
                for text in texts:
                    embeddings.append(self.generate_embedding(text))
                    progress.update(task, advance=1)
        else:
            for text in texts:
                embeddings.append(self.generate_embedding(text))

        return embeddings

    def _prepare_text(self, text: str) -> str:
        if not text:
            return ""

        cleaned = " ".join(text.split())

        if len(cleaned) > MAX_EMBEDDING_CHARS:
            cleaned = cleaned[:MAX_EMBEDDING_CHARS] + "..."
            console.print(f"[yellow]Document truncated to {MAX_EMBEDDING_CHARS} characters for embedding[/yellow]")

        return cleaned

    def get_model_info(self) -> Dict[str, Any]:
        """Name, size and modification time of the configured embedding model."""
        try:
            if not self.ensure_model_ready():
                return {"error": "Model not available"}

            for model in self._available_models():
                model_name = self._model_name(model)
                if self._matches_model(model_name):
                    return {
                        "name": model_name,
                        "size": model.get('size') or 'Unknown',
                        "modified_at": str(model.get('modified_at') or 'Unknown'),
                        "ready": True
                    }

            return {"error": "Model not found"}

        except Exception as e:
            return {"error": str(e)}

    def get_status(self) -> Dict[str, Any]:
        """Connection and model status, as shown by the status command."""
        status = {
            "host": self.host,
            "model": self.model,
            "connection": False,
            "model_ready": False,
            "error": None
        }

        try:
            self.client.list()
            status["connection"] = True
        except Exception as e:
            status["error"] = f"Connection failed: {e}"
            return status

        try:
            status["model_ready"] = self.ensure_model_ready()
            if status["model_ready"]:
                status["model_info"] = self.get_model_info()
        except Exception as e:
            status["error"] = f"Model check failed: {e}"

        return status


def get_embedding_client(host: Optional[str] = None,
                         model: Optional[str] = None) -> OllamaEmbeddingClient:
    """Get an embedding client configured from the ollama settings."""
    return OllamaEmbeddingClient(host=host, model=model)


def test_embedding_client(text: str = "Experienced software engineer skilled in Python and cloud platforms.") -> bool:
    """Embed a sample resume line end to end and report each step."""
    console.print("[cyan]Testing Ollama embedding client...[/cyan]")

    client = get_embedding_client()

    if not client.test_connection():
        console.print("[red]✗ Connection test failed[/red]")
        return False

    console.print("[green]✓ Connection successful[/green]")

    if not client.ensure_model_ready():
        console.print("[red]✗ Model not ready[/red]")
        return False

    embedding = client.generate_embedding(text)
    if embedding is None:
        console.print("[red]✗ Embedding generation failed[/red]")
        return False

    console.print(f"[green]✓ Generated embedding with shape: {embedding.shape}[/green]")
    console.print("[green]✓ Embedding client test passed![/green]")

    return True
