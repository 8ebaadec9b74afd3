"""
Taxonomía inicial de gastos: categorías, subcategorías y sus keywords.

Es la fuente del catálogo de sinónimos que usa el clasificador local y
de los datos que `seed_categories` carga en la base de datos.
El orden importa: ante empate de puntaje gana la subcategoría que aparece primero.
"""

# (categoría, icono, [(subcategoría, icono, keywords), ...])
TAXONOMY: tuple[tuple[str, str, tuple[tuple[str, str, tuple[str, ...]], ...]], ...] = (
    (
        "Comida",
        "🍔",
        (
            ("Restaurantes", "🍽️", (
                "restaurante", "almuerzo", "cena", "parrilla", "bodegon", "bistro",
                "menu ejecutivo", "cubierto",
            )),
            ("Supermercado", "🛒", (
                "supermercado", "super", "mercado", "almacen", "verduleria", "carniceria",
                "coto", "carrefour", "jumbo", "chino", "dietetica",
            )),
            ("Delivery", "🛵", (
                "delivery", "pedidosya", "rappi", "envio comida",
            )),
            ("Cafetería", "☕", (
                "cafe", "cafeteria", "medialunas", "desayuno", "merienda", "starbucks",
            )),
            ("Comida rápida", "🍕", (
                "hamburguesa", "pizza", "empanadas", "mcdonalds", "burger", "lomito",
                "sandwich", "pancho",
            )),
        ),
    ),
    (
        "Transporte",
        "🚗",
        (
            ("Taxi y apps de viaje", "🚕", (
                "uber", "taxi", "cabify", "didi", "remis",
            )),
            ("Transporte público", "🚌", (
                "colectivo", "subte", "tren", "sube", "bondi", "boleto",
            )),
            ("Combustible", "⛽", (
                "nafta", "combustible", "gasolina", "gasoil", "ypf", "shell", "axion",
            )),
            ("Estacionamiento y peajes", "🅿️", (
                "estacionamiento", "cochera", "peaje", "parking",
            )),
            ("Mantenimiento del auto", "🔧", (
                "mecanico", "gomeria", "service auto", "lavadero", "repuesto", "seguro auto",
            )),
        ),
    ),
    (
        "Servicios",
        "💡",
        (
            ("Luz", "💡", ("luz", "electricidad", "edenor", "edesur")),
            ("Gas", "🔥", ("gas natural", "metrogas", "garrafa")),
            ("Agua", "🚰", ("agua", "aysa")),
            ("Internet y telefonía", "📶", (
                "internet", "wifi", "celular", "telefono", "fibertel", "movistar",
                "personal", "claro", "abono",
            )),
            ("Impuestos", "🧾", (
                "impuesto", "patente", "afip", "monotributo", "rentas", "abl",
            )),
        ),
    ),
    (
        "Entretenimiento",
        "🎬",
        (
            ("Streaming", "📺", (
                "netflix", "spotify", "disney", "hbo", "prime video", "youtube premium",
            )),
            ("Cine y espectáculos", "🎭", (
                "cine", "teatro", "recital", "concierto", "entradas", "show",
            )),
            ("Salidas", "🍻", (
                "bar", "cerveza", "boliche", "tragos", "birra", "fiesta",
            )),
            ("Juegos", "🎮", (
                "juego", "videojuego", "steam", "playstation", "xbox",
            )),
        ),
    ),
    (
        "Salud",
        "💊",
        (
            ("Farmacia", "💊", (
                "farmacia", "remedio", "medicamento", "ibuprofeno", "paracetamol",
                "antibiotico",
            )),
            ("Consultas médicas", "🩺", (
                "medico", "doctor", "consulta", "dentista", "odontologo", "psicologo",
                "analisis clinicos",
            )),
            ("Prepaga", "🏥", ("prepaga", "obra social", "osde", "swiss medical")),
            ("Gimnasio", "🏋️", (
                "gimnasio", "gym", "crossfit", "yoga", "pilates", "entrenamiento",
            )),
        ),
    ),
    (
        "Compras",
        "🛍️",
        (
            ("Ropa y calzado", "👕", (
                "ropa", "remera", "pantalon", "zapatillas", "zapatos", "campera", "jean",
                "vestido",
            )),
            ("Regalos", "🎁", ("regalo", "cumpleaños", "obsequio")),
            ("Compras online", "📦", (
                "mercadolibre", "amazon", "shein", "temu", "compra online",
            )),
        ),
    ),
    (
        "Educación",
        "📚",
        (
            ("Cursos", "🎓", ("curso", "capacitacion", "udemy", "clase", "matricula")),
            ("Libros y útiles", "📖", (
                "libro", "libreria", "cuaderno", "fotocopias", "utiles",
            )),
            ("Colegio y universidad", "🏫", (
                "colegio", "cuota escolar", "universidad", "facultad", "escuela",
            )),
        ),
    ),
    (
        "Hogar",
        "🏠",
        (
            ("Alquiler", "🔑", ("alquiler", "expensas", "inmobiliaria")),
            ("Limpieza", "🧹", (
                "limpieza", "detergente", "lavandina", "escoba", "trapo",
            )),
            ("Muebles y decoración", "🛋️", (
                "mueble", "silla", "mesa", "sillon", "decoracion", "lampara", "colchon",
            )),
            ("Reparaciones", "🛠️", (
                "plomero", "electricista", "gasista", "pintura", "ferreteria", "arreglo",
            )),
        ),
    ),
    (
        "Belleza",
        "💅",
        (
            ("Peluquería", "💇", (
                "peluqueria", "corte pelo", "barberia", "tintura", "peinado",
            )),
            ("Cuidado personal", "🧴", (
                "perfume", "maquillaje", "crema", "shampoo", "desodorante", "manicura",
                "depilacion",
            )),
        ),
    ),
    (
        "Mascotas",
        "🐾",
        (
            ("Veterinaria", "🐶", ("veterinaria", "veterinario", "vacuna", "castracion")),
            ("Alimento para mascotas", "🦴", (
                "alimento perro", "alimento gato", "balanceado", "piedritas", "petshop",
            )),
        ),
    ),
    (
        "Viajes",
        "✈️",
        (
            ("Alojamiento", "🏨", ("hotel", "hostel", "airbnb", "alojamiento", "cabaña")),
            ("Pasajes", "🎫", (
                "pasaje", "vuelo", "avion", "aerolineas", "micro", "omnibus", "flybondi",
            )),
            ("Excursiones", "🗺️", ("excursion", "tour", "paseo", "visita guiada")),
        ),
    ),
    (
        "Tecnología",
        "💻",
        (
            ("Electrónica", "🎧", (
                "computadora", "notebook", "auriculares", "cargador", "tablet", "monitor",
                "teclado", "mouse",
            )),
            ("Software y suscripciones", "🧩", (
                "software", "licencia", "icloud", "google one", "chatgpt", "dominio",
                "hosting",
            )),
        ),
    ),
    (
        "Otros",
        "📦",
        (
            ("Gastos imprevistos", "⚠️", ("imprevisto", "urgencia", "emergencia")),
            ("Otros no clasificados", "📦", ("otros", "varios")),
        ),
    ),
)


SPANISH_SYNONYMS: dict[str, list[str]] = {
    subcategory: list(keywords)
    for _, _, subcategories in TAXONOMY
    for subcategory, _, keywords in subcategories
}
