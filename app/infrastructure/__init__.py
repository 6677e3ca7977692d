"""
Capa de Infraestructura - Mottu Vision.

Implementaciones concretas de los puertos de la capa de aplicación.

Estructura:
- db/: tablas, repositorios SQL, id allocator, transacciones y seeder
- services/: Servicios de infraestructura (Clock, hash de senhas)
"""
