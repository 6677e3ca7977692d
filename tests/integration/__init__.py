"""
Integration tests package.

Tests sobre SQLite in-memory que verifican:
- Id allocator (max + 1)
- Seeder idempotente
- Transacciones de los casos de uso
- Health checks

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""
