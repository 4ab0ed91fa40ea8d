"""Enums of the MAVLink ``ardupilotmega`` dialect."""

from ...protocol.dialect import Dialect
from ..common import common

ardupilotmega = Dialect("ardupilotmega", includes=[common])

# Calibration

AccelcalVehiclePos = ardupilotmega.enum(
    "ACCELCAL_VEHICLE_POS",
    "Vehicle orientation requested during accelerometer calibration.",
    [
        ("ACCELCAL_VEHICLE_POS_LEVEL", 1, ""),
        ("ACCELCAL_VEHICLE_POS_LEFT", 2, ""),
        ("ACCELCAL_VEHICLE_POS_RIGHT", 3, ""),
        ("ACCELCAL_VEHICLE_POS_NOSEDOWN", 4, ""),
        ("ACCELCAL_VEHICLE_POS_NOSEUP", 5, ""),
        ("ACCELCAL_VEHICLE_POS_BACK", 6, ""),
        ("ACCELCAL_VEHICLE_POS_SUCCESS", 16777215, ""),
        ("ACCELCAL_VEHICLE_POS_FAILED", 16777216, ""),
    ],
)

MagCalStatus = ardupilotmega.enum(
    "MAG_CAL_STATUS",
    "Progress of an onboard compass calibration.",
    [
        ("MAG_CAL_NOT_STARTED", 0, ""),
        ("MAG_CAL_WAITING_TO_START", 1, ""),
        ("MAG_CAL_RUNNING_STEP_ONE", 2, ""),
        ("MAG_CAL_RUNNING_STEP_TWO", 3, ""),
        ("MAG_CAL_SUCCESS", 4, ""),
        ("MAG_CAL_FAILED", 5, ""),
    ],
)

# Limits and rally points

LimitsState = ardupilotmega.enum(
    "LIMITS_STATE",
    "State of the APM limits module.",
    [
        ("LIMITS_INIT", 0, "Pre-initialization"),
        ("LIMITS_DISABLED", 1, "Disabled"),
        ("LIMITS_ENABLED", 2, "Checking limits"),
        ("LIMITS_TRIGGERED", 3, "A limit has been breached"),
        ("LIMITS_RECOVERING", 4, "Taking action eg. RTL"),
        ("LIMITS_RECOVERED", 5, "We're no longer in breach of a limit"),
    ],
)

LimitModule = ardupilotmega.enum(
    "LIMIT_MODULE",
    "Limit module identifiers.",
    [
        ("LIMIT_GPSLOCK", 1, "GPS lock required"),
        ("LIMIT_GEOFENCE", 2, "Geofence"),
        ("LIMIT_ALTITUDE", 4, "Altitude limits"),
    ],
    bitmask=True,
)

RallyFlags = ardupilotmega.enum(
    "RALLY_FLAGS",
    "Flags in RALLY_POINT message",
    [
        ("FAVORABLE_WIND", 1, "Flag set when requiring favorable winds for landing."),
        ("LAND_IMMEDIATELY", 2, "Flag set when plane is to immediately descend to break altitude and land without GCS intervention. Flag not set when plane is to loiter at Rally point until commanded to land."),
    ],
    bitmask=True,
)

# Camera

CameraStatusTypes = ardupilotmega.enum(
    "CAMERA_STATUS_TYPES",
    "Camera event types reported by CAMERA_STATUS.",
    [
        ("CAMERA_STATUS_TYPE_HEARTBEAT", 0, "Camera heartbeat, announce camera component ID at 1hz"),
        ("CAMERA_STATUS_TYPE_TRIGGER", 1, "Camera image triggered"),
        ("CAMERA_STATUS_TYPE_DISCONNECT", 2, "Camera connection lost"),
        ("CAMERA_STATUS_TYPE_ERROR", 3, "Camera unknown error"),
        ("CAMERA_STATUS_TYPE_LOWBATT", 4, "Camera battery low. Parameter p1 shows reported voltage"),
        ("CAMERA_STATUS_TYPE_LOWSTORE", 5, "Camera storage low. Parameter p1 shows reported shots remaining"),
        ("CAMERA_STATUS_TYPE_LOWSTOREV", 6, "Camera storage low. Parameter p1 shows reported video minutes remaining"),
    ],
)

CameraFeedbackFlags = ardupilotmega.enum(
    "CAMERA_FEEDBACK_FLAGS",
    "Kind of image reported by CAMERA_FEEDBACK.",
    [
        ("CAMERA_FEEDBACK_PHOTO", 0, "Shooting photos, not video"),
        ("CAMERA_FEEDBACK_VIDEO", 1, "Shooting video, not stills"),
        ("CAMERA_FEEDBACK_BADEXPOSURE", 2, "Unable to achieve requested exposure (e.g. shutter speed too low)"),
        ("CAMERA_FEEDBACK_CLOSEDLOOP", 3, "Closed loop feedback from camera, we know for sure it has successfully taken a picture"),
        ("CAMERA_FEEDBACK_OPENLOOP", 4, "Open loop camera, an image trigger has been requested but we can't know for sure it has successfully taken a picture"),
    ],
)

# Remote logging

MavRemoteLogDataBlockCommands = ardupilotmega.enum(
    "MAV_REMOTE_LOG_DATA_BLOCK_COMMANDS",
    "Special ACK block numbers control activation of dataflash log streaming.",
    [
        ("MAV_REMOTE_LOG_DATA_BLOCK_STOP", 2147483645, "UAV to stop sending DataFlash blocks"),
        ("MAV_REMOTE_LOG_DATA_BLOCK_START", 2147483646, "UAV to start sending DataFlash blocks"),
    ],
)

MavRemoteLogDataBlockStatuses = ardupilotmega.enum(
    "MAV_REMOTE_LOG_DATA_BLOCK_STATUSES",
    "Possible remote log data block statuses",
    [
        ("MAV_REMOTE_LOG_DATA_BLOCK_NACK", 0, "This block has NOT been received"),
        ("MAV_REMOTE_LOG_DATA_BLOCK_ACK", 1, "This block has been received"),
    ],
)

# Estimation and tuning

EkfStatusFlags = ardupilotmega.enum(
    "EKF_STATUS_FLAGS",
    "Flags in EKF_STATUS message",
    [
        ("EKF_ATTITUDE", 1, "set if EKF's attitude estimate is good"),
        ("EKF_VELOCITY_HORIZ", 2, "set if EKF's horizontal velocity estimate is good"),
        ("EKF_VELOCITY_VERT", 4, "set if EKF's vertical velocity estimate is good"),
        ("EKF_POS_HORIZ_REL", 8, "set if EKF's horizontal position (relative) estimate is good"),
        ("EKF_POS_HORIZ_ABS", 16, "set if EKF's horizontal position (absolute) estimate is good"),
        ("EKF_POS_VERT_ABS", 32, "set if EKF's vertical position (absolute) estimate is good"),
        ("EKF_POS_VERT_AGL", 64, "set if EKF's vertical position (above ground) estimate is good"),
        ("EKF_CONST_POS_MODE", 128, "EKF is in constant position mode and does not know it's absolute or relative position"),
        ("EKF_PRED_POS_HORIZ_REL", 256, "set if EKF's predicted horizontal position (relative) estimate is good"),
        ("EKF_PRED_POS_HORIZ_ABS", 512, "set if EKF's predicted horizontal position (absolute) estimate is good"),
    ],
    bitmask=True,
)

PidTuningAxis = ardupilotmega.enum(
    "PID_TUNING_AXIS",
    "Axis a PID_TUNING message reports on.",
    [
        ("PID_TUNING_ROLL", 1, ""),
        ("PID_TUNING_PITCH", 2, ""),
        ("PID_TUNING_YAW", 3, ""),
        ("PID_TUNING_ACCZ", 4, ""),
        ("PID_TUNING_STEER", 5, ""),
        ("PID_TUNING_LANDING", 6, ""),
    ],
)

# GoPro

GoproHeartbeatStatus = ardupilotmega.enum(
    "GOPRO_HEARTBEAT_STATUS",
    "Connection state of a GoPro behind a Solo gimbal.",
    [
        ("GOPRO_HEARTBEAT_STATUS_DISCONNECTED", 0, "No GoPro connected"),
        ("GOPRO_HEARTBEAT_STATUS_INCOMPATIBLE", 1, "The detected GoPro is not HeroBus compatible"),
        ("GOPRO_HEARTBEAT_STATUS_CONNECTED", 2, "A HeroBus compatible GoPro is connected"),
        ("GOPRO_HEARTBEAT_STATUS_ERROR", 3, "An unrecoverable error was encountered with the connected GoPro, it may require a power cycle"),
    ],
)

GoproHeartbeatFlags = ardupilotmega.enum(
    "GOPRO_HEARTBEAT_FLAGS",
    "GoPro state flags.",
    [
        ("GOPRO_FLAG_RECORDING", 1, "GoPro is currently recording"),
    ],
    bitmask=True,
)

GoproRequestStatus = ardupilotmega.enum(
    "GOPRO_REQUEST_STATUS",
    "Outcome of a GoPro get/set request.",
    [
        ("GOPRO_REQUEST_SUCCESS", 0, "The write message with ID indicated succeeded"),
        ("GOPRO_REQUEST_FAILED", 1, "The write message with ID indicated failed"),
    ],
)

GoproCommand = ardupilotmega.enum(
    "GOPRO_COMMAND",
    "GoPro settings addressed by GOPRO_GET_REQUEST and GOPRO_SET_REQUEST.",
    [
        ("GOPRO_COMMAND_POWER", 0, "(Get/Set)"),
        ("GOPRO_COMMAND_CAPTURE_MODE", 1, "(Get/Set)"),
        ("GOPRO_COMMAND_SHUTTER", 2, "(___/Set)"),
        ("GOPRO_COMMAND_BATTERY", 3, "(Get/___)"),
        ("GOPRO_COMMAND_MODEL", 4, "(Get/___)"),
        ("GOPRO_COMMAND_VIDEO_SETTINGS", 5, "(Get/Set)"),
        ("GOPRO_COMMAND_LOW_LIGHT", 6, "(Get/Set)"),
        ("GOPRO_COMMAND_PHOTO_RESOLUTION", 7, "(Get/Set)"),
        ("GOPRO_COMMAND_PHOTO_BURST_RATE", 8, "(Get/Set)"),
        ("GOPRO_COMMAND_PROTUNE", 9, "(Get/Set)"),
        ("GOPRO_COMMAND_PROTUNE_WHITE_BALANCE", 10, "(Get/Set) Hero 3+ Only"),
        ("GOPRO_COMMAND_PROTUNE_COLOUR", 11, "(Get/Set) Hero 3+ Only"),
        ("GOPRO_COMMAND_PROTUNE_GAIN", 12, "(Get/Set) Hero 3+ Only"),
        ("GOPRO_COMMAND_PROTUNE_SHARPNESS", 13, "(Get/Set) Hero 3+ Only"),
        ("GOPRO_COMMAND_PROTUNE_EXPOSURE", 14, "(Get/Set) Hero 3+ Only"),
        ("GOPRO_COMMAND_TIME", 15, "(Get/Set)"),
        ("GOPRO_COMMAND_CHARGING", 16, "(Get/Set)"),
    ],
)

GoproCaptureMode = ardupilotmega.enum(
    "GOPRO_CAPTURE_MODE",
    "Capture mode of a GoPro.",
    [
        ("GOPRO_CAPTURE_MODE_VIDEO", 0, "Video mode"),
        ("GOPRO_CAPTURE_MODE_PHOTO", 1, "Photo mode"),
        ("GOPRO_CAPTURE_MODE_BURST", 2, "Burst mode, hero 3+ only"),
        ("GOPRO_CAPTURE_MODE_TIME_LAPSE", 3, "Time lapse mode, hero 3+ only"),
        ("GOPRO_CAPTURE_MODE_MULTI_SHOT", 4, "Multi shot mode, hero 4 only"),
        ("GOPRO_CAPTURE_MODE_PLAYBACK", 5, "Playback mode, hero 4 only, silver only except when LCD or HDMI is connected to black"),
        ("GOPRO_CAPTURE_MODE_SETUP", 6, "Playback mode, hero 4 only"),
        ("GOPRO_CAPTURE_MODE_UNKNOWN", 255, "Mode not yet known"),
    ],
)

# Vehicle flight modes (HEARTBEAT.custom_mode)

CopterMode = ardupilotmega.enum(
    "COPTER_MODE",
    "A mapping of copter flight modes for custom_mode field of heartbeat.",
    [
        ("COPTER_MODE_STABILIZE", 0, ""),
        ("COPTER_MODE_ACRO", 1, ""),
        ("COPTER_MODE_ALT_HOLD", 2, ""),
        ("COPTER_MODE_AUTO", 3, ""),
        ("COPTER_MODE_GUIDED", 4, ""),
        ("COPTER_MODE_LOITER", 5, ""),
        ("COPTER_MODE_RTL", 6, ""),
        ("COPTER_MODE_CIRCLE", 7, ""),
        ("COPTER_MODE_LAND", 9, ""),
        ("COPTER_MODE_DRIFT", 11, ""),
        ("COPTER_MODE_SPORT", 13, ""),
        ("COPTER_MODE_FLIP", 14, ""),
        ("COPTER_MODE_AUTOTUNE", 15, ""),
        ("COPTER_MODE_POSHOLD", 16, ""),
        ("COPTER_MODE_BRAKE", 17, ""),
        ("COPTER_MODE_THROW", 18, ""),
        ("COPTER_MODE_AVOID_ADSB", 19, ""),
        ("COPTER_MODE_GUIDED_NOGPS", 20, ""),
        ("COPTER_MODE_SMART_RTL", 21, ""),
    ],
)

PlaneMode = ardupilotmega.enum(
    "PLANE_MODE",
    "A mapping of plane flight modes for custom_mode field of heartbeat.",
    [
        ("PLANE_MODE_MANUAL", 0, ""),
        ("PLANE_MODE_CIRCLE", 1, ""),
        ("PLANE_MODE_STABILIZE", 2, ""),
        ("PLANE_MODE_TRAINING", 3, ""),
        ("PLANE_MODE_ACRO", 4, ""),
        ("PLANE_MODE_FLY_BY_WIRE_A", 5, ""),
        ("PLANE_MODE_FLY_BY_WIRE_B", 6, ""),
        ("PLANE_MODE_CRUISE", 7, ""),
        ("PLANE_MODE_AUTOTUNE", 8, ""),
        ("PLANE_MODE_AUTO", 10, ""),
        ("PLANE_MODE_RTL", 11, ""),
        ("PLANE_MODE_LOITER", 12, ""),
        ("PLANE_MODE_AVOID_ADSB", 14, ""),
        ("PLANE_MODE_GUIDED", 15, ""),
        ("PLANE_MODE_INITIALIZING", 16, ""),
        ("PLANE_MODE_QSTABILIZE", 17, ""),
        ("PLANE_MODE_QHOVER", 18, ""),
        ("PLANE_MODE_QLOITER", 19, ""),
        ("PLANE_MODE_QLAND", 20, ""),
        ("PLANE_MODE_QRTL", 21, ""),
    ],
)

RoverMode = ardupilotmega.enum(
    "ROVER_MODE",
    "A mapping of rover flight modes for custom_mode field of heartbeat.",
    [
        ("ROVER_MODE_MANUAL", 0, ""),
        ("ROVER_MODE_ACRO", 1, ""),
        ("ROVER_MODE_STEERING", 3, ""),
        ("ROVER_MODE_HOLD", 4, ""),
        ("ROVER_MODE_AUTO", 10, ""),
        ("ROVER_MODE_RTL", 11, ""),
        ("ROVER_MODE_SMART_RTL", 12, ""),
        ("ROVER_MODE_GUIDED", 15, ""),
        ("ROVER_MODE_INITIALIZING", 16, ""),
    ],
)

TrackerMode = ardupilotmega.enum(
    "TRACKER_MODE",
    "A mapping of antenna tracker flight modes for custom_mode field of heartbeat.",
    [
        ("TRACKER_MODE_MANUAL", 0, ""),
        ("TRACKER_MODE_STOP", 1, ""),
        ("TRACKER_MODE_SCAN", 2, ""),
        ("TRACKER_MODE_SERVO_TEST", 3, ""),
        ("TRACKER_MODE_AUTO", 10, ""),
        ("TRACKER_MODE_INITIALIZING", 16, ""),
    ],
)
