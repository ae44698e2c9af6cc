"""
Configuration management for ResumeForge.

This module provides configuration management including:
- .env file support for environment variables
- Settings persistence and validation
- Default values and type checking
- CLI integration for config management
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional, List
from dotenv import load_dotenv, set_key, unset_key
from rich.console import Console
from rich.table import Table


class ConfigManager:
    """Manages ResumeForge configuration settings and .env files."""

    # Default configuration values
    DEFAULT_CONFIG = {
        # Ollama settings (semantic similarity embeddings)
        "ollama": {
            "host": "localhost",
            "port": 11434,
            "model": "nomic-embed-text",
            "timeout": 30,
            "max_retries": 3
        },

        # Semantic matching settings
        "semantic": {
            "enabled": True,
            "match_threshold": 0.7,
            "missing_threshold": 0.5,
            "max_concepts": 10,
            "max_chars": 8000,
            "use_cache": True
        },

        # Scoring weights
        "scoring": {
            "engine_weight": 0.6,
            "keyword_weight": 0.3,
            "semantic_weight": 0.5,
            "formatting_weight": 0.2,
            "max_missing_keywords": 20
        },

        # Keyword integration settings
        "integration": {
            "smart": True,
            "min_content_length": 100,
            "random_seed": None
        },

        # Document parsing settings
        "parsing": {
            "max_file_size_mb": 10
        },

        # Export settings
        "export": {
            "default_format": "json",
            "output_directory": ".",
            "include_timestamps": True
        },

        # CLI settings
        "cli": {
            "default_table_limit": 20,
            "color_output": True
        }
    }

    def __init__(self, config_dir: str = "."):
        self.config_dir = Path(config_dir)
        self.env_file = self.config_dir / ".env"
        self.config_file = self.config_dir / "resumeforge.config.json"
        self.console = Console()

        # Load configuration on initialization
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from .env and config files."""
        config = self._deep_copy_dict(self.DEFAULT_CONFIG)

        if self.env_file.exists():
            load_dotenv(str(self.env_file))

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r') as f:
                    file_config = json.load(f)
                config = self._merge_configs(config, file_config)
            except (json.JSONDecodeError, FileNotFoundError) as e:
                self.console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")

        # Environment variables win over the JSON file
        config = self._apply_env_overrides(config)

        return config

    def _deep_copy_dict(self, d: Dict[str, Any]) -> Dict[str, Any]:
        """Deep copy a dictionary."""
        result = {}
        for key, value in d.items():
            if isinstance(value, dict):
                result[key] = self._deep_copy_dict(value)
            elif isinstance(value, list):
                result[key] = value.copy()
            else:
                result[key] = value
        return result

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two configuration dictionaries."""
        result = self._deep_copy_dict(base)

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides."""
        env_mappings = {
            # Ollama settings
            "RESUMEFORGE_OLLAMA_HOST": ("ollama", "host"),
            "RESUMEFORGE_OLLAMA_PORT": ("ollama", "port"),
            "RESUMEFORGE_OLLAMA_MODEL": ("ollama", "model"),
            "RESUMEFORGE_OLLAMA_TIMEOUT": ("ollama", "timeout"),
            "RESUMEFORGE_OLLAMA_MAX_RETRIES": ("ollama", "max_retries"),

            # Semantic settings
            "RESUMEFORGE_SEMANTIC_ENABLED": ("semantic", "enabled"),
            "RESUMEFORGE_SEMANTIC_MATCH_THRESHOLD": ("semantic", "match_threshold"),
            "RESUMEFORGE_SEMANTIC_MISSING_THRESHOLD": ("semantic", "missing_threshold"),
            "RESUMEFORGE_SEMANTIC_MAX_CONCEPTS": ("semantic", "max_concepts"),
            "RESUMEFORGE_SEMANTIC_MAX_CHARS": ("semantic", "max_chars"),
            "RESUMEFORGE_SEMANTIC_CACHE": ("semantic", "use_cache"),

            # Scoring settings
            "RESUMEFORGE_ENGINE_WEIGHT": ("scoring", "engine_weight"),
            "RESUMEFORGE_KEYWORD_WEIGHT": ("scoring", "keyword_weight"),
            "RESUMEFORGE_SEMANTIC_WEIGHT": ("scoring", "semantic_weight"),
            "RESUMEFORGE_FORMATTING_WEIGHT": ("scoring", "formatting_weight"),
            "RESUMEFORGE_MAX_MISSING_KEYWORDS": ("scoring", "max_missing_keywords"),

            # Integration settings
            "RESUMEFORGE_SMART_INTEGRATION": ("integration", "smart"),
            "RESUMEFORGE_MIN_CONTENT_LENGTH": ("integration", "min_content_length"),
            "RESUMEFORGE_RANDOM_SEED": ("integration", "random_seed"),

            # Parsing settings
            "RESUMEFORGE_MAX_FILE_SIZE_MB": ("parsing", "max_file_size_mb"),

            # Export settings
            "RESUMEFORGE_EXPORT_FORMAT": ("export", "default_format"),
            "RESUMEFORGE_EXPORT_DIR": ("export", "output_directory"),
            "RESUMEFORGE_EXPORT_TIMESTAMPS": ("export", "include_timestamps"),

            # CLI settings
            "RESUMEFORGE_TABLE_LIMIT": ("cli", "default_table_limit"),
            "RESUMEFORGE_COLOR_OUTPUT": ("cli", "color_output")
        }

        for env_var, (section, key) in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                # Type conversion based on default value type
                default_value = self.DEFAULT_CONFIG[section][key]
                try:
                    config[section][key] = self._convert_value(value, default_value)
                except ValueError:
                    self.console.print(f"[yellow]Warning: Invalid value for {env_var}: {value}[/yellow]")

        return config

    @staticmethod
    def _convert_value(value: str, default_value: Any) -> Any:
        """Convert a string value to the type of the default."""
        if isinstance(default_value, bool):
            return value.lower() in ('true', '1', 'yes', 'on')
        elif isinstance(default_value, int):
            return int(value)
        elif isinstance(default_value, float):
            return float(value)
        elif default_value is None:
            # Only optional integers are declared with a None default
            if value.lower() in ('', 'none', 'null'):
                return None
            return int(value)
        return value

    def get(self, section: str, key: Optional[str] = None) -> Any:
        """Get configuration value."""
        if key is None:
            return self.config.get(section, {})
        return self.config.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> bool:
        """Set configuration value."""
        if section not in self.config:
            self.config[section] = {}

        if section in self.DEFAULT_CONFIG:
            if key not in self.DEFAULT_CONFIG[section]:
                self.console.print(f"[yellow]Warning: Unknown config key '{section}.{key}'[/yellow]")

        self.config[section][key] = value
        return self.save_config()

    def save_config(self) -> bool:
        """Save current configuration to JSON file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
            return True
        except OSError as e:
            self.console.print(f"[red]Error saving config: {e}[/red]")
            return False

    def set_env_var(self, key: str, value: str) -> bool:
        """Set environment variable in .env file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            set_key(str(self.env_file), key, value)
            os.environ[key] = value
            self.config = self._load_config()
            return True
        except OSError as e:
            self.console.print(f"[red]Error setting environment variable: {e}[/red]")
            return False

    def unset_env_var(self, key: str) -> bool:
        """Remove environment variable from .env file."""
        try:
            if self.env_file.exists():
                unset_key(str(self.env_file), key)
                os.environ.pop(key, None)
                self.config = self._load_config()
            return True
        except OSError as e:
            self.console.print(f"[red]Error removing environment variable: {e}[/red]")
            return False

    def reset_to_defaults(self) -> bool:
        """Reset configuration to default values."""
        self.config = self._deep_copy_dict(self.DEFAULT_CONFIG)
        return self.save_config()

    def validate_config(self) -> List[str]:
        """Validate current configuration and return list of issues."""
        issues = []

        ollama_port = self.get("ollama", "port")
        if not isinstance(ollama_port, int) or ollama_port < 1 or ollama_port > 65535:
            issues.append(f"Invalid Ollama port: {ollama_port}")

        ollama_timeout = self.get("ollama", "timeout")
        if not isinstance(ollama_timeout, (int, float)) or ollama_timeout <= 0:
            issues.append(f"Invalid Ollama timeout: {ollama_timeout}")

        for key in ("match_threshold", "missing_threshold"):
            threshold = self.get("semantic", key)
            if not isinstance(threshold, (int, float)) or threshold < 0 or threshold > 1:
                issues.append(f"Invalid semantic {key.replace('_', ' ')}: {threshold}")

        weights = {}
        for key in ("engine_weight", "keyword_weight", "semantic_weight", "formatting_weight"):
            weight = self.get("scoring", key)
            if not isinstance(weight, (int, float)) or weight < 0 or weight > 1:
                issues.append(f"Invalid scoring {key.replace('_', ' ')}: {weight}")
            else:
                weights[key] = weight

        enhanced_keys = ("keyword_weight", "semantic_weight", "formatting_weight")
        if all(key in weights for key in enhanced_keys):
            total = sum(weights[key] for key in enhanced_keys)
            if abs(total - 1.0) > 0.001:
                issues.append(f"Keyword, semantic and formatting weights must sum to 1.0 (got {total:.2f})")

        max_size = self.get("parsing", "max_file_size_mb")
        if not isinstance(max_size, (int, float)) or max_size <= 0:
            issues.append(f"Invalid max file size: {max_size}")

        export_format = self.get("export", "default_format")
        if export_format not in ["csv", "json", "html"]:
            issues.append(f"Invalid export format: {export_format}")

        return issues

    def display_config(self) -> None:
        """Display current configuration in a formatted table."""
        self.console.print("[bold cyan]ResumeForge Configuration[/bold cyan]")
        self.console.print()

        for section_name, section_data in self.config.items():
            table = Table(title=f"{section_name.title()} Settings")
            table.add_column("Setting", style="cyan")
            table.add_column("Value", style="green")
            table.add_column("Type", style="dim")

            for key, value in section_data.items():
                value_str = str(value)
                if isinstance(value, bool):
                    value_str = "✓" if value else "✗"
                elif isinstance(value, str) and len(value) > 50:
                    value_str = value[:47] + "..."

                table.add_row(
                    key.replace("_", " ").title(),
                    value_str,
                    type(value).__name__
                )

            self.console.print(table)
            self.console.print()

    def get_env_template(self) -> str:
        """Generate a template .env file with all available settings."""
        template_lines = [
            "# ResumeForge Configuration",
            "# Copy this file to .env and modify as needed",
            "",
            "# Ollama Settings",
            "# RESUMEFORGE_OLLAMA_HOST=localhost",
            "# RESUMEFORGE_OLLAMA_PORT=11434",
            "# RESUMEFORGE_OLLAMA_MODEL=nomic-embed-text",
            "# RESUMEFORGE_OLLAMA_TIMEOUT=30",
            "# RESUMEFORGE_OLLAMA_MAX_RETRIES=3",
            "",
            "# Semantic Matching Settings",
            "# RESUMEFORGE_SEMANTIC_ENABLED=true",
            "# RESUMEFORGE_SEMANTIC_MATCH_THRESHOLD=0.7",
            "# RESUMEFORGE_SEMANTIC_MISSING_THRESHOLD=0.5",
            "# RESUMEFORGE_SEMANTIC_MAX_CONCEPTS=10",
            "# RESUMEFORGE_SEMANTIC_MAX_CHARS=8000",
            "# RESUMEFORGE_SEMANTIC_CACHE=true",
            "",
            "# Scoring Settings",
            "# RESUMEFORGE_ENGINE_WEIGHT=0.6",
            "# RESUMEFORGE_KEYWORD_WEIGHT=0.3",
            "# RESUMEFORGE_SEMANTIC_WEIGHT=0.5",
            "# RESUMEFORGE_FORMATTING_WEIGHT=0.2",
            "# RESUMEFORGE_MAX_MISSING_KEYWORDS=20",
            "",
            "# Keyword Integration Settings",
            "# RESUMEFORGE_SMART_INTEGRATION=true",
            "# RESUMEFORGE_MIN_CONTENT_LENGTH=100",
            "# RESUMEFORGE_RANDOM_SEED=42",
            "",
            "# Parsing Settings",
            "# RESUMEFORGE_MAX_FILE_SIZE_MB=10",
            "",
            "# Export Settings",
            "# RESUMEFORGE_EXPORT_FORMAT=json",
            "# RESUMEFORGE_EXPORT_DIR=.",
            "# RESUMEFORGE_EXPORT_TIMESTAMPS=true",
            "",
            "# CLI Settings",
            "# RESUMEFORGE_TABLE_LIMIT=20",
            "# RESUMEFORGE_COLOR_OUTPUT=true",
            ""
        ]

        return "\n".join(template_lines)

    def export_env_template(self, output_path: Optional[str] = None) -> bool:
        """Export .env template to file."""
        try:
            template_path = output_path or ".env.template"
            with open(template_path, 'w') as f:
                f.write(self.get_env_template())
            self.console.print(f"[green]✓ .env template exported to: {template_path}[/green]")
            return True
        except OSError as e:
            self.console.print(f"[red]Error exporting template: {e}[/red]")
            return False

    def get_connection_info(self) -> Dict[str, Any]:
        """Get connection information for services."""
        return {
            "ollama": {
                "host": self.get("ollama", "host"),
                "port": self.get("ollama", "port"),
                "url": f"http://{self.get('ollama', 'host')}:{self.get('ollama', 'port')}",
                "model": self.get("ollama", "model")
            },
            "semantic": {
                "enabled": self.get("semantic", "enabled"),
                "cache": self.get("semantic", "use_cache")
            }
        }


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    if not hasattr(get_config_manager, '_instance'):
        get_config_manager._instance = ConfigManager()
    return get_config_manager._instance


def reload_config(config_dir: Optional[str] = None) -> ConfigManager:
    """Reload configuration from files."""
    get_config_manager._instance = ConfigManager(config_dir or ".")
    return get_config_manager()
