"""Domain layer: enums and exceptions. No framework or persistence imports."""
