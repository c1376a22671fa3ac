# Базовый URL MapTiler Cloud Tiles API
MAPTILER_TILES_BASE = 'https://api.maptiler.com/tiles'

# Имя query-параметра с API-ключом
MAPTILER_KEY_PARAM = 'key'

# Переменные окружения с API-ключом (в порядке приоритета)
API_KEY_ENV_VARS = ('MAPTILER_KEY', 'API_KEY')

# Файлы с секретами, которые подхватываются из текущего каталога
SECRETS_ENV_FILES = ('.env', '.secrets.env')

# Количество видимых символов API-ключа при маскировке
API_KEY_VISIBLE_PREFIX_LEN = 4

# Границы уровней приближения для всех наборов тайлов
MIN_ZOOM = 0
MAX_ZOOM = 20

# Границы зума для пользовательского (custom) набора
CUSTOM_MIN_ZOOM = MIN_ZOOM
CUSTOM_MAX_ZOOM = MAX_ZOOM

# Единственный код ответа, считающийся успешным
HTTP_OK = 200

# Формат логов по умолчанию
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL_DEFAULT = 'INFO'

# Сигнатура JPEG (первые три байта файла)
JPEG_MAGIC = b'\xff\xd8\xff'
