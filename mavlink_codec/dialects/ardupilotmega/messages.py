"""Messages the ``ardupilotmega`` dialect adds on top of ``common``."""

from ...protocol.fields import Field
from .enums import ardupilotmega

# Sensors and calibration

SensorOffsets = ardupilotmega.message(150, "SENSOR_OFFSETS", 134,
    "Offsets and calibrations values for hardware sensors. This makes it easier to debug the "
    "calibration process.", [
    Field("mag_ofs_x", "int16_t", "magnetometer X offset"),
    Field("mag_ofs_y", "int16_t", "magnetometer Y offset"),
    Field("mag_ofs_z", "int16_t", "magnetometer Z offset"),
    Field("mag_declination", "float", "magnetic declination (radians)"),
    Field("raw_press", "int32_t", "raw pressure from barometer"),
    Field("raw_temp", "int32_t", "raw temperature from barometer"),
    Field("gyro_cal_x", "float", "gyro X calibration"),
    Field("gyro_cal_y", "float", "gyro Y calibration"),
    Field("gyro_cal_z", "float", "gyro Z calibration"),
    Field("accel_cal_x", "float", "accel X calibration"),
    Field("accel_cal_y", "float", "accel Y calibration"),
    Field("accel_cal_z", "float", "accel Z calibration"),
])

SetMagOffsets = ardupilotmega.message(151, "SET_MAG_OFFSETS", 219,
    "Set the magnetometer offsets", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("mag_ofs_x", "int16_t", "magnetometer X offset"),
    Field("mag_ofs_y", "int16_t", "magnetometer Y offset"),
    Field("mag_ofs_z", "int16_t", "magnetometer Z offset"),
])

Meminfo = ardupilotmega.message(152, "MEMINFO", 208,
    "state of APM memory", [
    Field("brkval", "uint16_t", "heap top"),
    Field("freemem", "uint16_t", "free memory"),
])

ApAdc = ardupilotmega.message(153, "AP_ADC", 188,
    "raw ADC output", [
    Field("adc1", "uint16_t", "ADC output 1"),
    Field("adc2", "uint16_t", "ADC output 2"),
    Field("adc3", "uint16_t", "ADC output 3"),
    Field("adc4", "uint16_t", "ADC output 4"),
    Field("adc5", "uint16_t", "ADC output 5"),
    Field("adc6", "uint16_t", "ADC output 6"),
])

# Camera and mount

DigicamConfigure = ardupilotmega.message(154, "DIGICAM_CONFIGURE", 84,
    "Configure on-board Camera Control System.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("mode", "uint8_t", "Mode enumeration from 1 to N //P, TV, AV, M, Etc (0 means ignore)"),
    Field("shutter_speed", "uint16_t", "Divisor number //e.g. 1000 means 1/1000 (0 means ignore)"),
    Field("aperture", "uint8_t", "F stop number x 10 //e.g. 28 means 2.8 (0 means ignore)"),
    Field("iso", "uint8_t", "ISO enumeration from 1 to N //e.g. 80, 100, 200, Etc (0 means ignore)"),
    Field("exposure_type", "uint8_t", "Exposure type enumeration from 1 to N (0 means ignore)"),
    Field("command_id", "uint8_t", "Command Identity (incremental loop: 0 to 255)//A command sent multiple times will be executed or pooled just once"),
    Field("engine_cut_off", "uint8_t", "Main engine cut-off time before camera trigger in seconds/10 (0 means no cut-off)"),
    Field("extra_param", "uint8_t", "Extra parameters enumeration (0 means ignore)"),
    Field("extra_value", "float", "Correspondent value to given extra_param"),
])

DigicamControl = ardupilotmega.message(155, "DIGICAM_CONTROL", 22,
    "Control on-board Camera Control System to take shots.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("session", "uint8_t", "0: stop, 1: start or keep it up //Session control e.g. show/hide lens"),
    Field("zoom_pos", "uint8_t", "1 to N //Zoom's absolute position (0 means ignore)"),
    Field("zoom_step", "int8_t", "-100 to 100 //Zooming step value to offset zoom from the current position"),
    Field("focus_lock", "uint8_t", "0: unlock focus or keep unlocked, 1: lock focus or keep locked, 3: re-lock focus"),
    Field("shot", "uint8_t", "0: ignore, 1: shot or start filming"),
    Field("command_id", "uint8_t", "Command Identity (incremental loop: 0 to 255)//A command sent multiple times will be executed or pooled just once"),
    Field("extra_param", "uint8_t", "Extra parameters enumeration (0 means ignore)"),
    Field("extra_value", "float", "Correspondent value to given extra_param"),
])

MountConfigure = ardupilotmega.message(156, "MOUNT_CONFIGURE", 19,
    "Message to configure a camera mount, directional antenna, etc.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("mount_mode", "uint8_t", "mount operating mode (see MAV_MOUNT_MODE enum)", enum="MAV_MOUNT_MODE"),
    Field("stab_roll", "uint8_t", "(1 = yes, 0 = no)"),
    Field("stab_pitch", "uint8_t", "(1 = yes, 0 = no)"),
    Field("stab_yaw", "uint8_t", "(1 = yes, 0 = no)"),
])

MountControl = ardupilotmega.message(157, "MOUNT_CONTROL", 21,
    "Message to control a camera mount, directional antenna, etc.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("input_a", "int32_t", "pitch(deg*100) or lat, depending on mount mode"),
    Field("input_b", "int32_t", "roll(deg*100) or lon depending on mount mode"),
    Field("input_c", "int32_t", "yaw(deg*100) or alt (in cm) depending on mount mode"),
    Field("save_position", "uint8_t", "if \"1\" it will save current trimmed position on EEPROM (just valid for NEUTRAL and LANDING)"),
])

MountStatus = ardupilotmega.message(158, "MOUNT_STATUS", 134,
    "Message with some status from APM to GCS about camera or antenna mount", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("pointing_a", "int32_t", "pitch(deg*100)"),
    Field("pointing_b", "int32_t", "roll(deg*100)"),
    Field("pointing_c", "int32_t", "yaw(deg*100)"),
])

# Geofence

FencePoint = ardupilotmega.message(160, "FENCE_POINT", 78,
    "A fence point. Used to set a point when from GCS -> MAV. Also used to return a point from MAV -> "
    "GCS", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("idx", "uint8_t", "point index (first point is 1, 0 is for return point)"),
    Field("count", "uint8_t", "total number of points (for sanity checking)"),
    Field("lat", "float", "Latitude of point"),
    Field("lng", "float", "Longitude of point"),
])

FenceFetchPoint = ardupilotmega.message(161, "FENCE_FETCH_POINT", 68,
    "Request a current fence point from MAV", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("idx", "uint8_t", "point index (first point is 1, 0 is for return point)"),
])

FenceStatus = ardupilotmega.message(162, "FENCE_STATUS", 189,
    "Status of geo-fencing. Sent in extended status stream when fencing enabled", [
    Field("breach_status", "uint8_t", "0 if currently inside fence, 1 if outside"),
    Field("breach_count", "uint16_t", "number of fence breaches"),
    Field("breach_type", "uint8_t", "last breach type (see FENCE_BREACH_* enum)", enum="FENCE_BREACH"),
    Field("breach_time", "uint32_t", "time of last breach in milliseconds since boot"),
])

# Estimator and simulation

Ahrs = ardupilotmega.message(163, "AHRS", 127,
    "Status of DCM attitude estimator", [
    Field("omegaIx", "float", "X gyro drift estimate rad/s"),
    Field("omegaIy", "float", "Y gyro drift estimate rad/s"),
    Field("omegaIz", "float", "Z gyro drift estimate rad/s"),
    Field("accel_weight", "float", "average accel_weight"),
    Field("renorm_val", "float", "average renormalisation value"),
    Field("error_rp", "float", "average error_roll_pitch value"),
    Field("error_yaw", "float", "average error_yaw value"),
])

Simstate = ardupilotmega.message(164, "SIMSTATE", 154,
    "Status of simulation environment, if used", [
    Field("roll", "float", "Roll angle (rad)"),
    Field("pitch", "float", "Pitch angle (rad)"),
    Field("yaw", "float", "Yaw angle (rad)"),
    Field("xacc", "float", "X acceleration m/s/s"),
    Field("yacc", "float", "Y acceleration m/s/s"),
    Field("zacc", "float", "Z acceleration m/s/s"),
    Field("xgyro", "float", "Angular speed around X axis rad/s"),
    Field("ygyro", "float", "Angular speed around Y axis rad/s"),
    Field("zgyro", "float", "Angular speed around Z axis rad/s"),
    Field("lat", "int32_t", "Latitude in degrees * 1E7"),
    Field("lng", "int32_t", "Longitude in degrees * 1E7"),
])

Hwstatus = ardupilotmega.message(165, "HWSTATUS", 21,
    "Status of key hardware", [
    Field("Vcc", "uint16_t", "board voltage (mV)"),
    Field("I2Cerr", "uint8_t", "I2C error count"),
])

Radio = ardupilotmega.message(166, "RADIO", 21,
    "Status generated by radio", [
    Field("rssi", "uint8_t", "local signal strength"),
    Field("remrssi", "uint8_t", "remote signal strength"),
    Field("txbuf", "uint8_t", "how full the tx buffer is as a percentage"),
    Field("noise", "uint8_t", "background noise level"),
    Field("remnoise", "uint8_t", "remote background noise level"),
    Field("rxerrors", "uint16_t", "receive errors"),
    Field("fixed", "uint16_t", "count of error corrected packets"),
])

LimitsStatus = ardupilotmega.message(167, "LIMITS_STATUS", 144,
    "Status of AP_Limits. Sent in extended status stream when AP_Limits is enabled", [
    Field("limits_state", "uint8_t", "state of AP_Limits, (see enum LimitState, LIMITS_STATE)", enum="LIMITS_STATE"),
    Field("last_trigger", "uint32_t", "time of last breach in milliseconds since boot"),
    Field("last_action", "uint32_t", "time of last recovery action in milliseconds since boot"),
    Field("last_recovery", "uint32_t", "time of last successful recovery in milliseconds since boot"),
    Field("last_clear", "uint32_t", "time of last all-clear in milliseconds since boot"),
    Field("breach_count", "uint16_t", "number of fence breaches"),
    Field("mods_enabled", "uint8_t", "AP_Limit_Module bitfield of enabled modules, (see enum moduleid or LIMIT_MODULE)", enum="LIMIT_MODULE"),
    Field("mods_required", "uint8_t", "AP_Limit_Module bitfield of required modules, (see enum moduleid or LIMIT_MODULE)", enum="LIMIT_MODULE"),
    Field("mods_triggered", "uint8_t", "AP_Limit_Module bitfield of triggered modules, (see enum moduleid or LIMIT_MODULE)", enum="LIMIT_MODULE"),
])

Wind = ardupilotmega.message(168, "WIND", 1,
    "Wind estimation", [
    Field("direction", "float", "wind direction that wind is coming from (degrees)"),
    Field("speed", "float", "wind speed in ground plane (m/s)"),
    Field("speed_z", "float", "vertical wind speed (m/s)"),
])

# Generic data packets

Data16 = ardupilotmega.message(169, "DATA16", 234,
    "Data packet, size 16", [
    Field("type", "uint8_t", "data type"),
    Field("len", "uint8_t", "data length"),
    Field("data", "uint8_t[16]", "raw data"),
])

Data32 = ardupilotmega.message(170, "DATA32", 73,
    "Data packet, size 32", [
    Field("type", "uint8_t", "data type"),
    Field("len", "uint8_t", "data length"),
    Field("data", "uint8_t[32]", "raw data"),
])

Data64 = ardupilotmega.message(171, "DATA64", 181,
    "Data packet, size 64", [
    Field("type", "uint8_t", "data type"),
    Field("len", "uint8_t", "data length"),
    Field("data", "uint8_t[64]", "raw data"),
])

Data96 = ardupilotmega.message(172, "DATA96", 22,
    "Data packet, size 96", [
    Field("type", "uint8_t", "data type"),
    Field("len", "uint8_t", "data length"),
    Field("data", "uint8_t[96]", "raw data"),
])

Rangefinder = ardupilotmega.message(173, "RANGEFINDER", 83,
    "Rangefinder reporting", [
    Field("distance", "float", "distance in meters"),
    Field("voltage", "float", "raw voltage if available, zero otherwise"),
])

AirspeedAutocal = ardupilotmega.message(174, "AIRSPEED_AUTOCAL", 167,
    "Airspeed auto-calibration", [
    Field("vx", "float", "GPS velocity north m/s"),
    Field("vy", "float", "GPS velocity east m/s"),
    Field("vz", "float", "GPS velocity down m/s"),
    Field("diff_pressure", "float", "Differential pressure pascals"),
    Field("EAS2TAS", "float", "Estimated to true airspeed ratio"),
    Field("ratio", "float", "Airspeed ratio"),
    Field("state_x", "float", "EKF state x"),
    Field("state_y", "float", "EKF state y"),
    Field("state_z", "float", "EKF state z"),
    Field("Pax", "float", "EKF Pax"),
    Field("Pby", "float", "EKF Pby"),
    Field("Pcz", "float", "EKF Pcz"),
])

# Rally points

RallyPoint = ardupilotmega.message(175, "RALLY_POINT", 138,
    "A rally point. Used to set a point when from GCS -> MAV. Also used to return a point from MAV -> "
    "GCS", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("idx", "uint8_t", "point index (first point is 0)"),
    Field("count", "uint8_t", "total number of points (for sanity checking)"),
    Field("lat", "int32_t", "Latitude of point in degrees * 1E7"),
    Field("lng", "int32_t", "Longitude of point in degrees * 1E7"),
    Field("alt", "int16_t", "Transit / loiter altitude in meters relative to home"),
    Field("break_alt", "int16_t", "Break altitude in meters relative to home"),
    Field("land_dir", "uint16_t", "Heading to aim for when landing. In centi-degrees."),
    Field("flags", "uint8_t", "See RALLY_FLAGS enum for definition of the bitmask.", enum="RALLY_FLAGS"),
])

RallyFetchPoint = ardupilotmega.message(176, "RALLY_FETCH_POINT", 234,
    "Request a current rally point from MAV. MAV should respond with a RALLY_POINT message. MAV should "
    "not respond if the request is invalid.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("idx", "uint8_t", "point index (first point is 0)"),
])

CompassmotStatus = ardupilotmega.message(177, "COMPASSMOT_STATUS", 240,
    "Status of compassmot calibration", [
    Field("throttle", "uint16_t", "throttle (percent*10)"),
    Field("current", "float", "current (amps)"),
    Field("interference", "uint16_t", "interference (percent)"),
    Field("CompensationX", "float", "Motor Compensation X"),
    Field("CompensationY", "float", "Motor Compensation Y"),
    Field("CompensationZ", "float", "Motor Compensation Z"),
])

Ahrs2 = ardupilotmega.message(178, "AHRS2", 47,
    "Status of secondary AHRS filter if available", [
    Field("roll", "float", "Roll angle (rad)"),
    Field("pitch", "float", "Pitch angle (rad)"),
    Field("yaw", "float", "Yaw angle (rad)"),
    Field("altitude", "float", "Altitude (MSL)"),
    Field("lat", "int32_t", "Latitude in degrees * 1E7"),
    Field("lng", "int32_t", "Longitude in degrees * 1E7"),
])

CameraStatus = ardupilotmega.message(179, "CAMERA_STATUS", 189,
    "Camera Event", [
    Field("time_usec", "uint64_t", "Image timestamp (microseconds since UNIX epoch, according to camera clock)"),
    Field("target_system", "uint8_t", "System ID"),
    Field("cam_idx", "uint8_t", "Camera ID"),
    Field("img_idx", "uint16_t", "Image index"),
    Field("event_id", "uint8_t", "See CAMERA_STATUS_TYPES enum for definition of the bitmask", enum="CAMERA_STATUS_TYPES"),
    Field("p1", "float", "Parameter 1 (meaning depends on event, see CAMERA_STATUS_TYPES enum)"),
    Field("p2", "float", "Parameter 2 (meaning depends on event, see CAMERA_STATUS_TYPES enum)"),
    Field("p3", "float", "Parameter 3 (meaning depends on event, see CAMERA_STATUS_TYPES enum)"),
    Field("p4", "float", "Parameter 4 (meaning depends on event, see CAMERA_STATUS_TYPES enum)"),
])

CameraFeedback = ardupilotmega.message(180, "CAMERA_FEEDBACK", 52,
    "Camera Capture Feedback", [
    Field("time_usec", "uint64_t", "Image timestamp (microseconds since UNIX epoch), as passed in by CAMERA_STATUS message (or autopilot if no CCB)"),
    Field("target_system", "uint8_t", "System ID"),
    Field("cam_idx", "uint8_t", "Camera ID"),
    Field("img_idx", "uint16_t", "Image index"),
    Field("lat", "int32_t", "Latitude in (deg * 1E7)"),
    Field("lng", "int32_t", "Longitude in (deg * 1E7)"),
    Field("alt_msl", "float", "Altitude Absolute (meters AMSL)"),
    Field("alt_rel", "float", "Altitude Relative (meters above HOME location)"),
    Field("roll", "float", "Camera Roll angle (earth frame, degrees, +-180)"),
    Field("pitch", "float", "Camera Pitch angle (earth frame, degrees, +-180)"),
    Field("yaw", "float", "Camera Yaw (earth frame, degrees, 0-360, true)"),
    Field("foc_len", "float", "Focal Length (mm)"),
    Field("flags", "uint8_t", "See CAMERA_FEEDBACK_FLAGS enum for definition of the bitmask", enum="CAMERA_FEEDBACK_FLAGS"),
])

Battery2 = ardupilotmega.message(181, "BATTERY2", 174,
    "2nd Battery status", [
    Field("voltage", "uint16_t", "voltage in millivolts"),
    Field("current_battery", "int16_t", "Battery current, in 10*milliamperes (1 = 10 milliampere), -1: autopilot does not measure the current"),
])

Ahrs3 = ardupilotmega.message(182, "AHRS3", 229,
    "Status of third AHRS filter if available. This is for ANU research group (Ali and Sean)", [
    Field("roll", "float", "Roll angle (rad)"),
    Field("pitch", "float", "Pitch angle (rad)"),
    Field("yaw", "float", "Yaw angle (rad)"),
    Field("altitude", "float", "Altitude (MSL)"),
    Field("lat", "int32_t", "Latitude in degrees * 1E7"),
    Field("lng", "int32_t", "Longitude in degrees * 1E7"),
    Field("v1", "float", "test variable1"),
    Field("v2", "float", "test variable2"),
    Field("v3", "float", "test variable3"),
    Field("v4", "float", "test variable4"),
])

AutopilotVersionRequest = ardupilotmega.message(183, "AUTOPILOT_VERSION_REQUEST", 85,
    "Request the autopilot version from the system/component.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
])

# Remote dataflash logging

RemoteLogDataBlock = ardupilotmega.message(184, "REMOTE_LOG_DATA_BLOCK", 159,
    "Send a block of log data to remote location", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seqno", "uint32_t", "log data block sequence number", enum="MAV_REMOTE_LOG_DATA_BLOCK_COMMANDS"),
    Field("data", "uint8_t[200]", "log data block"),
])

RemoteLogBlockStatus = ardupilotmega.message(185, "REMOTE_LOG_BLOCK_STATUS", 186,
    "Send Status of each log block that autopilot board might have sent", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seqno", "uint32_t", "log data block sequence number"),
    Field("status", "uint8_t", "log data block status", enum="MAV_REMOTE_LOG_DATA_BLOCK_STATUSES"),
])

LedControl = ardupilotmega.message(186, "LED_CONTROL", 72,
    "Control vehicle LEDs", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("instance", "uint8_t", "Instance (LED instance to control or 255 for all LEDs)"),
    Field("pattern", "uint8_t", "Pattern (see LED_PATTERN_ENUM)"),
    Field("custom_len", "uint8_t", "Custom Byte Length"),
    Field("custom_bytes", "uint8_t[24]", "Custom Bytes"),
])

# Compass calibration

MagCalProgress = ardupilotmega.message(191, "MAG_CAL_PROGRESS", 92,
    "Reports progress of compass calibration.", [
    Field("compass_id", "uint8_t", "Compass being calibrated"),
    Field("cal_mask", "uint8_t", "Bitmask of compasses being calibrated"),
    Field("cal_status", "uint8_t", "Status (see MAG_CAL_STATUS enum)", enum="MAG_CAL_STATUS"),
    Field("attempt", "uint8_t", "Attempt number"),
    Field("completion_pct", "uint8_t", "Completion percentage"),
    Field("completion_mask", "uint8_t[10]", "Bitmask of sphere sections (see http://en.wikipedia.org/wiki/Geodesic_grid)"),
    Field("direction_x", "float", "Body frame direction vector for display"),
    Field("direction_y", "float", "Body frame direction vector for display"),
    Field("direction_z", "float", "Body frame direction vector for display"),
])

MagCalReport = ardupilotmega.message(192, "MAG_CAL_REPORT", 36,
    "Reports results of completed compass calibration. Sent until MAG_CAL_ACK received.", [
    Field("compass_id", "uint8_t", "Compass being calibrated"),
    Field("cal_mask", "uint8_t", "Bitmask of compasses being calibrated"),
    Field("cal_status", "uint8_t", "Status (see MAG_CAL_STATUS enum)", enum="MAG_CAL_STATUS"),
    Field("autosaved", "uint8_t", "0=requires a MAV_CMD_DO_ACCEPT_MAG_CAL, 1=saved to parameters"),
    Field("fitness", "float", "RMS milligauss residuals"),
    Field("ofs_x", "float", "X offset"),
    Field("ofs_y", "float", "Y offset"),
    Field("ofs_z", "float", "Z offset"),
    Field("diag_x", "float", "X diagonal (matrix 11)"),
    Field("diag_y", "float", "Y diagonal (matrix 22)"),
    Field("diag_z", "float", "Z diagonal (matrix 33)"),
    Field("offdiag_x", "float", "X off-diagonal (matrix 12 and 21)"),
    Field("offdiag_y", "float", "Y off-diagonal (matrix 13 and 31)"),
    Field("offdiag_z", "float", "Z off-diagonal (matrix 32 and 23)"),
])

EkfStatusReport = ardupilotmega.message(193, "EKF_STATUS_REPORT", 71,
    "EKF Status message including flags and variances", [
    Field("flags", "uint16_t", "Flags", enum="EKF_STATUS_FLAGS"),
    Field("velocity_variance", "float", "Velocity variance"),
    Field("pos_horiz_variance", "float", "Horizontal Position variance"),
    Field("pos_vert_variance", "float", "Vertical Position variance"),
    Field("compass_variance", "float", "Compass variance"),
    Field("terrain_alt_variance", "float", "Terrain Altitude variance"),
])

PidTuning = ardupilotmega.message(194, "PID_TUNING", 98,
    "PID tuning information", [
    Field("axis", "uint8_t", "axis", enum="PID_TUNING_AXIS"),
    Field("desired", "float", "desired rate (degrees/s)"),
    Field("achieved", "float", "achieved rate (degrees/s)"),
    Field("FF", "float", "FF component"),
    Field("P", "float", "P component"),
    Field("I", "float", "I component"),
    Field("D", "float", "D component"),
])

# Gimbal

GimbalReport = ardupilotmega.message(200, "GIMBAL_REPORT", 134,
    "3 axis gimbal mesuraments", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("delta_time", "float", "Time since last update (seconds)"),
    Field("delta_angle_x", "float", "Delta angle X (radians)"),
    Field("delta_angle_y", "float", "Delta angle Y (radians)"),
    Field("delta_angle_z", "float", "Delta angle X (radians)"),
    Field("delta_velocity_x", "float", "Delta velocity X (m/s)"),
    Field("delta_velocity_y", "float", "Delta velocity Y (m/s)"),
    Field("delta_velocity_z", "float", "Delta velocity Z (m/s)"),
    Field("joint_roll", "float", "Joint ROLL (radians)"),
    Field("joint_el", "float", "Joint EL (radians)"),
    Field("joint_az", "float", "Joint AZ (radians)"),
])

GimbalControl = ardupilotmega.message(201, "GIMBAL_CONTROL", 205,
    "Control message for rate gimbal", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("demanded_rate_x", "float", "Demanded angular rate X (rad/s)"),
    Field("demanded_rate_y", "float", "Demanded angular rate Y (rad/s)"),
    Field("demanded_rate_z", "float", "Demanded angular rate Z (rad/s)"),
])

GimbalTorqueCmdReport = ardupilotmega.message(214, "GIMBAL_TORQUE_CMD_REPORT", 69,
    "100 Hz gimbal torque command telemetry", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("rl_torque_cmd", "int16_t", "Roll Torque Command"),
    Field("el_torque_cmd", "int16_t", "Elevation Torque Command"),
    Field("az_torque_cmd", "int16_t", "Azimuth Torque Command"),
])

# GoPro

GoproHeartbeat = ardupilotmega.message(215, "GOPRO_HEARTBEAT", 101,
    "Heartbeat from a HeroBus attached GoPro", [
    Field("status", "uint8_t", "Status", enum="GOPRO_HEARTBEAT_STATUS"),
    Field("capture_mode", "uint8_t", "Current capture mode", enum="GOPRO_CAPTURE_MODE"),
    Field("flags", "uint8_t", "additional status bits", enum="GOPRO_HEARTBEAT_FLAGS"),
])

GoproGetRequest = ardupilotmega.message(216, "GOPRO_GET_REQUEST", 50,
    "Request a GOPRO_COMMAND response from the GoPro", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("cmd_id", "uint8_t", "Command ID", enum="GOPRO_COMMAND"),
])

GoproGetResponse = ardupilotmega.message(217, "GOPRO_GET_RESPONSE", 202,
    "Response from a GOPRO_COMMAND get request", [
    Field("cmd_id", "uint8_t", "Command ID", enum="GOPRO_COMMAND"),
    Field("status", "uint8_t", "Status", enum="GOPRO_REQUEST_STATUS"),
    Field("value", "uint8_t[4]", "Value"),
])

GoproSetRequest = ardupilotmega.message(218, "GOPRO_SET_REQUEST", 17,
    "Request to set a GOPRO_COMMAND with a desired", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("cmd_id", "uint8_t", "Command ID", enum="GOPRO_COMMAND"),
    Field("value", "uint8_t[4]", "Value"),
])

GoproSetResponse = ardupilotmega.message(219, "GOPRO_SET_RESPONSE", 162,
    "Response from a GOPRO_COMMAND set request", [
    Field("cmd_id", "uint8_t", "Command ID", enum="GOPRO_COMMAND"),
    Field("status", "uint8_t", "Status", enum="GOPRO_REQUEST_STATUS"),
])

Rpm = ardupilotmega.message(226, "RPM", 207,
    "RPM sensor output", [
    Field("rpm1", "float", "RPM Sensor1"),
    Field("rpm2", "float", "RPM Sensor2"),
])
