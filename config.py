# config.py

# 摄像头：会自动尝试这些索引
CAM_INDEX_CANDIDATES = [0, 1, 2]

# 摄像头后端：会按顺序尝试（cv2.CAP_<name>，DEFAULT 表示不指定）
CAP_BACKENDS = ["DSHOW", "MSMF", "DEFAULT"]

CAM_W, CAM_H = 1280, 720
MIRROR = True

SHOW_CAMERA = True  # True: 显示摄像头窗口（按 Q 关闭该窗口，不影响识别）

# MediaPipe Hands
MP_MAX_NUM_HANDS = 1
MP_MODEL_COMPLEXITY = 1
MP_MIN_DETECTION_CONFIDENCE = 0.7
MP_MIN_TRACKING_CONFIDENCE = 0.5

# Landmark indices (MediaPipe hand model)
NUM_LANDMARKS = 21
WRIST = 0
THUMB_TIP = 4
INDEX_FINGER_MCP = 5
INDEX_FINGER_TIP = 8
MIDDLE_FINGER_MCP = 9
MIDDLE_FINGER_TIP = 12

# Gesture thresholds (normalized screen space, y grows downward)
THUMB_UP_WRIST_RATIO = 0.9

# Hand -> world mapping
HAND_SENTINEL = (1000.0, 1000.0, 1000.0)  # "no hand": far outside the scene
HAND_DISTANCE = 3.0                       # world units in front of the camera
UNPROJECT_DEPTH = 0.5                     # NDC depth of the picking ray point

# 3D camera
CAMERA_FOV = 75.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
CAMERA_POSITION = (0.0, 0.0, 5.0)
CAMERA_TARGET = (0.0, 0.0, 0.0)

# Particles
PARTICLE_COUNT = 3000
INITIAL_TEMPLATE = "sphere"

SPHERE_RADIUS = 1.5
SPHERE_SHELL = 0.1            # 外壳厚度（相对半径）
SPHERE_COLOR = (0.3, 0.6, 1.0)

HEART_SCALE = 1.0
HEART_Y_OFFSET = -1.5
HEART_COLOR = (1.0, 0.4, 0.6)

FLOWER_SCALE = 2.0
FLOWER_PETALS = 6
FLOWER_DEPTH = 0.25
FLOWER_COLOR = (1.0, 0.8, 0.1)

# Hand effect
PROXIMITY_RADIUS = 2.0
COLOR_LERP_RATE = 0.1         # 越大越快变白
BASE_SIZE = 0.05
SIZE_GAIN = 0.1
FIST_SIZE = 0.5
FIST_COLOR = (1.0, 0.0, 0.0)

# Viewer
WIN_W, WIN_H = 1280, 720
FPS = 60
BG_COLOR = (8, 8, 14)

# Logging
LOG_DIR_NAME = ".gesture_particles"
LOG_FILENAME = "gesture_particles.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
LOG_TO_FILE = False
DEBUG = False
