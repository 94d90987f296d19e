# store/data/seed.py
# Stala tabela katalogu: (name, description, price, image_url).
# Id nadaje CatalogRepo przy starcie, kolejno od 1.

_IMG = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=600&q=80"

PRODUCT_SEED = (
    ("Portátil Ultraligero X", "Potente portátil con pantalla OLED de 14 pulgadas.", "1299.99", _IMG.format("1496181133206-80ce9b88a853")),
    ("Smartphone Z Pro", "El último modelo con cámara de 200MP y acabado titanio.", "999.50", _IMG.format("1511707171634-5f897ff02aa9")),
    ("Auriculares NoiseCancel", "Cancelación de ruido activa y sonido de alta fidelidad.", "199.90", _IMG.format("1505740420928-5e560c06d30e")),
    ("Smartwatch Series 7", "Monitoreo de salud completo y correa deportiva.", "299.00", _IMG.format("1523275335684-37898b6baf30")),
    ("Tablet Pro 12.9", "Pantalla Liquid Retina ideal para creativos.", "1099.00", _IMG.format("1544244015-0df4b3ffc6b0")),
    ("Cámara Mirrorless 4K", "Sensor Full Frame para fotografía profesional.", "2100.00", _IMG.format("1516035069371-29a1b244cc32")),
    ("Teclado Mecánico RGB", "Switches azules y retroiluminación personalizable.", "89.99", _IMG.format("1587829741301-dc798b91add1")),
    ("Monitor UltraWide 34\"", "Curvo para una experiencia inmersiva en gaming.", "459.50", _IMG.format("1527443224154-c4a3942d3acf")),
    ("Consola Retro Game", "Diseño clásico con juegos modernos preinstalados.", "129.99", _IMG.format("1486401899868-0e435ed85128")),
    ("Altavoz Inteligente Home", "Asistente de voz integrado y sonido 360º.", "79.99", _IMG.format("1543512214-318c77a072bf")),
)
