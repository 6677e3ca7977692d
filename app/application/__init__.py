"""
Capa de Aplicación - Mottu Vision.

Contiene los casos de uso CRUD, la paginación y las interfaces (puertos)
que implementa la infraestructura.

Estructura:
- use_cases/: un caso de uso por recurso (usuarios, zonas, pátios, status, motos)
- interfaces/: Puertos (repositorios, id allocator, transacciones, reloj)
- pagination.py: páginas y enlaces self/prev/next
"""
