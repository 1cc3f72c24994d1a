"""
Punto de entrada de la calculadora tonta.

Ejecución:
    python3 src/main.py
    calculadora-tonta            (instalado con pip)
"""

from app.calculator_app import CalculatorApp


def main():
    """
    Crea la aplicación y ejecuta su bucle principal.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Muestra el error y el traceback
    """
    try:
        app = CalculatorApp()
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    raise SystemExit(main())
