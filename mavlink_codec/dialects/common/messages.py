"""
Messages of the MAVLink ``common`` dialect.

Fields are listed in declaration order; the wire layout is derived from it
(see ``protocol.fields.wire_order``). Each row carries the published
crc_extra of the message.
"""

from ...protocol.fields import Field
from .enums import common

# System and link status

Heartbeat = common.message(0, "HEARTBEAT", 50,
    "The heartbeat message shows that a system is present and responding. The type of the MAV and "
    "Autopilot hardware allow the receiving system to treat further messages from this system "
    "appropriate (e.g. by laying out the user interface based on the autopilot).", [
    Field("type", "uint8_t", "Type of the MAV (quadrotor, helicopter, etc.)", enum="MAV_TYPE"),
    Field("autopilot", "uint8_t", "Autopilot type / class.", enum="MAV_AUTOPILOT"),
    Field("base_mode", "uint8_t", "System mode bitfield.", enum="MAV_MODE_FLAG"),
    Field("custom_mode", "uint32_t", "A bitfield for use for autopilot-specific flags."),
    Field("system_status", "uint8_t", "System status flag.", enum="MAV_STATE"),
    Field("mavlink_version", "uint8_t", "MAVLink version, not writable by user, gets added by protocol because of magic data type", default=3),
])

SysStatus = common.message(1, "SYS_STATUS", 124,
    "The general system state. If the system is following the MAVLink standard, the system state is "
    "mainly defined by three orthogonal states/modes: The system mode, which is either LOCKED "
    "(motors shut down and locked), MANUAL (system under RC control), GUIDED (system with "
    "autonomous position control, position setpoint controlled manually) or AUTO (system guided by "
    "path/waypoint planner).", [
    Field("onboard_control_sensors_present", "uint32_t", "Bitmap showing which onboard controllers and sensors are present.", enum="MAV_SYS_STATUS_SENSOR"),
    Field("onboard_control_sensors_enabled", "uint32_t", "Bitmap showing which onboard controllers and sensors are enabled.", enum="MAV_SYS_STATUS_SENSOR"),
    Field("onboard_control_sensors_health", "uint32_t", "Bitmap showing which onboard controllers and sensors are operational or have an error.", enum="MAV_SYS_STATUS_SENSOR"),
    Field("load", "uint16_t", "Maximum usage in percent of the mainloop time, (0%: 0, 100%: 1000)"),
    Field("voltage_battery", "uint16_t", "Battery voltage, in millivolts (1 = 1 millivolt)"),
    Field("current_battery", "int16_t", "Battery current, in 10*milliamperes (1 = 10 milliampere), -1: autopilot does not measure the current"),
    Field("battery_remaining", "int8_t", "Remaining battery energy: (0%: 0, 100%: 100), -1: autopilot estimate the remaining battery"),
    Field("drop_rate_comm", "uint16_t", "Communication drops in percent, (0%: 0, 100%: 10'000)"),
    Field("errors_comm", "uint16_t", "Communication errors (UART, I2C, SPI, CAN), dropped packets on all links"),
    Field("errors_count1", "uint16_t", "Autopilot-specific errors"),
    Field("errors_count2", "uint16_t", "Autopilot-specific errors"),
    Field("errors_count3", "uint16_t", "Autopilot-specific errors"),
    Field("errors_count4", "uint16_t", "Autopilot-specific errors"),
])

SystemTime = common.message(2, "SYSTEM_TIME", 137,
    "The system time is the time of the master clock, typically the computer clock of the main onboard computer.", [
    Field("time_unix_usec", "uint64_t", "Timestamp of the master clock in microseconds since UNIX epoch."),
    Field("time_boot_ms", "uint32_t", "Timestamp of the component clock since boot time in milliseconds."),
])

Ping = common.message(4, "PING", 237,
    "A ping message either requesting or responding to a ping. This allows to measure the system "
    "latencies, including serial port, radio modem and UDP connections.", [
    Field("time_usec", "uint64_t", "Unix timestamp in microseconds or since system boot if smaller than MAVLink epoch (1.1.2009)"),
    Field("seq", "uint32_t", "PING sequence"),
    Field("target_system", "uint8_t", "0: request ping from all receiving systems, if greater than 0: message is a ping response and number is the system id of the requesting system"),
    Field("target_component", "uint8_t", "0: request ping from all receiving components, if greater than 0: message is a ping response and number is the system id of the requesting system"),
])

ChangeOperatorControl = common.message(5, "CHANGE_OPERATOR_CONTROL", 217,
    "Request to control this MAV", [
    Field("target_system", "uint8_t", "System the GCS requests control for"),
    Field("control_request", "uint8_t", "0: request control of this MAV, 1: Release control of this MAV"),
    Field("version", "uint8_t", "0: key as plaintext, 1-255: future, different hashing/encryption variants."),
    Field("passkey", "char[25]", "Password / Key, depending on version plaintext or encrypted. 25 or less characters, NULL terminated."),
])

ChangeOperatorControlAck = common.message(6, "CHANGE_OPERATOR_CONTROL_ACK", 104,
    "Accept / deny control of this MAV", [
    Field("gcs_system_id", "uint8_t", "ID of the GCS this message "),
    Field("control_request", "uint8_t", "0: request control of this MAV, 1: Release control of this MAV"),
    Field("ack", "uint8_t", "0: ACK, 1: NACK: Wrong passkey, 2: NACK: Unsupported passkey encryption method, 3: NACK: Already under control"),
])

AuthKey = common.message(7, "AUTH_KEY", 119,
    "Emit an encrypted signature / key identifying this system. PLEASE NOTE: This protocol has been "
    "kept simple, so transmitting the key requires an encrypted channel for true safety.", [
    Field("key", "char[32]", "key"),
])

SetMode = common.message(11, "SET_MODE", 89,
    "Set the system mode, as defined by enum MAV_MODE. There is no target component id as the mode "
    "is by definition for the overall aircraft, not only for one component.", [
    Field("target_system", "uint8_t", "The system setting the mode"),
    Field("base_mode", "uint8_t", "The new base mode", enum="MAV_MODE"),
    Field("custom_mode", "uint32_t", "The new autopilot-specific mode. This field can be ignored by an autopilot."),
])

# Parameters

ParamRequestRead = common.message(20, "PARAM_REQUEST_READ", 214,
    "Request to read the onboard parameter with the param_id string id. Onboard parameters are "
    "stored as key[const char*] -> value[float].", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("param_id", "char[16]", "Onboard parameter id, terminated by NULL if the length is less than 16 human-readable chars and WITHOUT null termination (NULL) byte if the length is exactly 16 chars"),
    Field("param_index", "int16_t", "Parameter index. Send -1 to use the param ID field as identifier (else the param id will be ignored)"),
])

ParamRequestList = common.message(21, "PARAM_REQUEST_LIST", 159,
    "Request all parameters of this component. After this request, all parameters are emitted.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
])

ParamValue = common.message(22, "PARAM_VALUE", 220,
    "Emit the value of a onboard parameter. The inclusion of param_count and param_index in the "
    "message allows the recipient to keep track of received parameters and allows him to re-request "
    "missing parameters after a loss or timeout.", [
    Field("param_id", "char[16]", "Onboard parameter id, terminated by NULL if the length is less than 16 human-readable chars"),
    Field("param_value", "float", "Onboard parameter value"),
    Field("param_type", "uint8_t", "Onboard parameter type.", enum="MAV_PARAM_TYPE"),
    Field("param_count", "uint16_t", "Total number of onboard parameters"),
    Field("param_index", "uint16_t", "Index of this onboard parameter"),
])

ParamSet = common.message(23, "PARAM_SET", 168,
    "Set a parameter value TEMPORARILY to RAM. It will be reset to default on system reboot. Send the "
    "ACTION MAV_ACTION_STORAGE_WRITE to PERMANENTLY write the RAM contents to EEPROM.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("param_id", "char[16]", "Onboard parameter id, terminated by NULL if the length is less than 16 human-readable chars"),
    Field("param_value", "float", "Onboard parameter value"),
    Field("param_type", "uint8_t", "Onboard parameter type.", enum="MAV_PARAM_TYPE"),
])

# Position and sensors

GpsRawInt = common.message(24, "GPS_RAW_INT", 24,
    "The global position, as returned by the Global Positioning System (GPS). This is NOT the global "
    "position estimate of the system, but rather a RAW sensor value.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("fix_type", "uint8_t", "GPS fix type.", enum="GPS_FIX_TYPE"),
    Field("lat", "int32_t", "Latitude (WGS84, EGM96 ellipsoid), in degrees * 1E7"),
    Field("lon", "int32_t", "Longitude (WGS84, EGM96 ellipsoid), in degrees * 1E7"),
    Field("alt", "int32_t", "Altitude (AMSL, NOT WGS84), in meters * 1000 (positive for up)."),
    Field("eph", "uint16_t", "GPS HDOP horizontal dilution of position (unitless). If unknown, set to: UINT16_MAX"),
    Field("epv", "uint16_t", "GPS VDOP vertical dilution of position (unitless). If unknown, set to: UINT16_MAX"),
    Field("vel", "uint16_t", "GPS ground speed (m/s * 100). If unknown, set to: UINT16_MAX"),
    Field("cog", "uint16_t", "Course over ground (NOT heading, but direction of movement) in degrees * 100, 0.0..359.99 degrees. If unknown, set to: UINT16_MAX"),
    Field("satellites_visible", "uint8_t", "Number of satellites visible. If unknown, set to 255"),
])

GpsStatus = common.message(25, "GPS_STATUS", 23,
    "The positioning status, as reported by GPS. This message is intended to display status "
    "information about each satellite visible to the receiver.", [
    Field("satellites_visible", "uint8_t", "Number of satellites visible"),
    Field("satellite_prn", "uint8_t[20]", "Global satellite ID"),
    Field("satellite_used", "uint8_t[20]", "0: Satellite not used, 1: used for localization"),
    Field("satellite_elevation", "uint8_t[20]", "Elevation (0: right on top of receiver, 90: on the horizon) of satellite"),
    Field("satellite_azimuth", "uint8_t[20]", "Direction of satellite, 0: 0 deg, 255: 360 deg."),
    Field("satellite_snr", "uint8_t[20]", "Signal to noise ratio of satellite"),
])

ScaledImu = common.message(26, "SCALED_IMU", 170,
    "The RAW IMU readings for the usual 9DOF sensor setup. This message should contain the scaled "
    "values to the described units", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("xacc", "int16_t", "X acceleration (mg)"),
    Field("yacc", "int16_t", "Y acceleration (mg)"),
    Field("zacc", "int16_t", "Z acceleration (mg)"),
    Field("xgyro", "int16_t", "Angular speed around X axis (millirad /sec)"),
    Field("ygyro", "int16_t", "Angular speed around Y axis (millirad /sec)"),
    Field("zgyro", "int16_t", "Angular speed around Z axis (millirad /sec)"),
    Field("xmag", "int16_t", "X Magnetic field (milli tesla)"),
    Field("ymag", "int16_t", "Y Magnetic field (milli tesla)"),
    Field("zmag", "int16_t", "Z Magnetic field (milli tesla)"),
])

RawImu = common.message(27, "RAW_IMU", 144,
    "The RAW IMU readings for the usual 9DOF sensor setup. This message should always contain the "
    "true raw values without any scaling to allow data capture and system debugging.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("xacc", "int16_t", "X acceleration (raw)"),
    Field("yacc", "int16_t", "Y acceleration (raw)"),
    Field("zacc", "int16_t", "Z acceleration (raw)"),
    Field("xgyro", "int16_t", "Angular speed around X axis (raw)"),
    Field("ygyro", "int16_t", "Angular speed around Y axis (raw)"),
    Field("zgyro", "int16_t", "Angular speed around Z axis (raw)"),
    Field("xmag", "int16_t", "X Magnetic field (raw)"),
    Field("ymag", "int16_t", "Y Magnetic field (raw)"),
    Field("zmag", "int16_t", "Z Magnetic field (raw)"),
])

RawPressure = common.message(28, "RAW_PRESSURE", 67,
    "The RAW pressure readings for the typical setup of one absolute pressure and one differential "
    "pressure sensor. The sensor values should be the raw, UNSCALED ADC values.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("press_abs", "int16_t", "Absolute pressure (raw)"),
    Field("press_diff1", "int16_t", "Differential pressure 1 (raw, 0 if nonexistant)"),
    Field("press_diff2", "int16_t", "Differential pressure 2 (raw, 0 if nonexistant)"),
    Field("temperature", "int16_t", "Raw Temperature measurement (raw)"),
])

ScaledPressure = common.message(29, "SCALED_PRESSURE", 115,
    "The pressure readings for the typical setup of one absolute and differential pressure sensor. "
    "The units are as specified in each field.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("press_abs", "float", "Absolute pressure (hectopascal)"),
    Field("press_diff", "float", "Differential pressure 1 (hectopascal)"),
    Field("temperature", "int16_t", "Temperature measurement (0.01 degrees celsius)"),
])

Attitude = common.message(30, "ATTITUDE", 39,
    "The attitude in the aeronautical frame (right-handed, Z-down, X-front, Y-right).", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("roll", "float", "Roll angle (rad, -pi..+pi)"),
    Field("pitch", "float", "Pitch angle (rad, -pi..+pi)"),
    Field("yaw", "float", "Yaw angle (rad, -pi..+pi)"),
    Field("rollspeed", "float", "Roll angular speed (rad/s)"),
    Field("pitchspeed", "float", "Pitch angular speed (rad/s)"),
    Field("yawspeed", "float", "Yaw angular speed (rad/s)"),
])

AttitudeQuaternion = common.message(31, "ATTITUDE_QUATERNION", 246,
    "The attitude in the aeronautical frame (right-handed, Z-down, X-front, Y-right), expressed as "
    "quaternion. Quaternion order is w, x, y, z and a zero rotation would be expressed as (1 0 0 0).", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("q1", "float", "Quaternion component 1, w (1 in null-rotation)"),
    Field("q2", "float", "Quaternion component 2, x (0 in null-rotation)"),
    Field("q3", "float", "Quaternion component 3, y (0 in null-rotation)"),
    Field("q4", "float", "Quaternion component 4, z (0 in null-rotation)"),
    Field("rollspeed", "float", "Roll angular speed (rad/s)"),
    Field("pitchspeed", "float", "Pitch angular speed (rad/s)"),
    Field("yawspeed", "float", "Yaw angular speed (rad/s)"),
])

LocalPositionNed = common.message(32, "LOCAL_POSITION_NED", 185,
    "The filtered local position (e.g. fused computer vision and accelerometers). Coordinate frame "
    "is right-handed, Z-axis down (aeronautical frame, NED / north-east-down convention)", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("x", "float", "X Position"),
    Field("y", "float", "Y Position"),
    Field("z", "float", "Z Position"),
    Field("vx", "float", "X Speed"),
    Field("vy", "float", "Y Speed"),
    Field("vz", "float", "Z Speed"),
])

GlobalPositionInt = common.message(33, "GLOBAL_POSITION_INT", 104,
    "The filtered global position (e.g. fused GPS and accelerometers). The position is in GPS-frame "
    "(right-handed, Z-up). It is designed as scaled integer message since the resolution of float is "
    "not sufficient.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("lat", "int32_t", "Latitude, expressed as degrees * 1E7"),
    Field("lon", "int32_t", "Longitude, expressed as degrees * 1E7"),
    Field("alt", "int32_t", "Altitude in meters, expressed as * 1000 (millimeters), AMSL (not WGS84 - note that virtually all GPS modules provide the AMSL as well)"),
    Field("relative_alt", "int32_t", "Altitude above ground in meters, expressed as * 1000 (millimeters)"),
    Field("vx", "int16_t", "Ground X Speed (Latitude, positive north), expressed as m/s * 100"),
    Field("vy", "int16_t", "Ground Y Speed (Longitude, positive east), expressed as m/s * 100"),
    Field("vz", "int16_t", "Ground Z Speed (Altitude, positive down), expressed as m/s * 100"),
    Field("hdg", "uint16_t", "Vehicle heading (yaw angle) in degrees * 100, 0.0..359.99 degrees. If unknown, set to: UINT16_MAX"),
])

# Radio control and servos

RcChannelsScaled = common.message(34, "RC_CHANNELS_SCALED", 237,
    "The scaled values of the RC channels received. (-100%) -10000, (0%) 0, (100%) 10000. Channels "
    "that are inactive should be set to UINT16_MAX.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("port", "uint8_t", "Servo output port (set of 8 outputs = 1 port). Most MAVs will just use one, but this allows for more than 8 servos."),
    Field("chan1_scaled", "int16_t", "RC channel 1 value scaled, (-100%) -10000, (0%) 0, (100%) 10000, (invalid) INT16_MAX."),
    Field("chan2_scaled", "int16_t", "RC channel 2 value scaled"),
    Field("chan3_scaled", "int16_t", "RC channel 3 value scaled"),
    Field("chan4_scaled", "int16_t", "RC channel 4 value scaled"),
    Field("chan5_scaled", "int16_t", "RC channel 5 value scaled"),
    Field("chan6_scaled", "int16_t", "RC channel 6 value scaled"),
    Field("chan7_scaled", "int16_t", "RC channel 7 value scaled"),
    Field("chan8_scaled", "int16_t", "RC channel 8 value scaled"),
    Field("rssi", "uint8_t", "Receive signal strength indicator, 0: 0%, 100: 100%, 255: invalid/unknown."),
])

RcChannelsRaw = common.message(35, "RC_CHANNELS_RAW", 244,
    "The RAW values of the RC channels received. The standard PPM modulation is as follows: 1000 "
    "microseconds: 0%, 2000 microseconds: 100%.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("port", "uint8_t", "Servo output port (set of 8 outputs = 1 port)."),
    Field("chan1_raw", "uint16_t", "RC channel 1 value, in microseconds. A value of UINT16_MAX implies the channel is unused."),
    Field("chan2_raw", "uint16_t", "RC channel 2 value, in microseconds"),
    Field("chan3_raw", "uint16_t", "RC channel 3 value, in microseconds"),
    Field("chan4_raw", "uint16_t", "RC channel 4 value, in microseconds"),
    Field("chan5_raw", "uint16_t", "RC channel 5 value, in microseconds"),
    Field("chan6_raw", "uint16_t", "RC channel 6 value, in microseconds"),
    Field("chan7_raw", "uint16_t", "RC channel 7 value, in microseconds"),
    Field("chan8_raw", "uint16_t", "RC channel 8 value, in microseconds"),
    Field("rssi", "uint8_t", "Receive signal strength indicator, 0: 0%, 100: 100%, 255: invalid/unknown."),
])

ServoOutputRaw = common.message(36, "SERVO_OUTPUT_RAW", 222,
    "The RAW values of the servo outputs (for RC input from the remote, use the RC_CHANNELS "
    "messages).", [
    Field("time_usec", "uint32_t", "Timestamp (microseconds since system boot)"),
    Field("port", "uint8_t", "Servo output port (set of 8 outputs = 1 port)."),
    Field("servo1_raw", "uint16_t", "Servo output 1 value, in microseconds"),
    Field("servo2_raw", "uint16_t", "Servo output 2 value, in microseconds"),
    Field("servo3_raw", "uint16_t", "Servo output 3 value, in microseconds"),
    Field("servo4_raw", "uint16_t", "Servo output 4 value, in microseconds"),
    Field("servo5_raw", "uint16_t", "Servo output 5 value, in microseconds"),
    Field("servo6_raw", "uint16_t", "Servo output 6 value, in microseconds"),
    Field("servo7_raw", "uint16_t", "Servo output 7 value, in microseconds"),
    Field("servo8_raw", "uint16_t", "Servo output 8 value, in microseconds"),
])

# Mission protocol

MissionRequestPartialList = common.message(37, "MISSION_REQUEST_PARTIAL_LIST", 212,
    "Request a partial list of mission items from the system/component. If start and end index are "
    "the same, just send one waypoint.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("start_index", "int16_t", "Start index, 0 by default"),
    Field("end_index", "int16_t", "End index, -1 by default (-1: send list to end). Else a valid index of the list"),
])

MissionWritePartialList = common.message(38, "MISSION_WRITE_PARTIAL_LIST", 9,
    "This message is sent to the MAV to write a partial list. If start index == end index, only one "
    "item will be transmitted / updated.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("start_index", "int16_t", "Start index, 0 by default and smaller / equal to the largest index of the current onboard list."),
    Field("end_index", "int16_t", "End index, equal or greater than start index."),
])

MissionItem = common.message(39, "MISSION_ITEM", 254,
    "Message encoding a mission item. This message is emitted to announce the presence of a mission "
    "item and to set a mission item on the system.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seq", "uint16_t", "Sequence"),
    Field("frame", "uint8_t", "The coordinate system of the waypoint.", enum="MAV_FRAME"),
    Field("command", "uint16_t", "The scheduled action for the waypoint.", enum="MAV_CMD"),
    Field("current", "uint8_t", "false:0, true:1"),
    Field("autocontinue", "uint8_t", "autocontinue to next wp"),
    Field("param1", "float", "PARAM1, see MAV_CMD enum"),
    Field("param2", "float", "PARAM2, see MAV_CMD enum"),
    Field("param3", "float", "PARAM3, see MAV_CMD enum"),
    Field("param4", "float", "PARAM4, see MAV_CMD enum"),
    Field("x", "float", "PARAM5 / local: x position, global: latitude"),
    Field("y", "float", "PARAM6 / y position: global: longitude"),
    Field("z", "float", "PARAM7 / z position: global: altitude (relative or absolute, depending on frame."),
])

MissionRequest = common.message(40, "MISSION_REQUEST", 230,
    "Request the information of the mission item with the sequence number seq. The response of the "
    "system to this message should be a MISSION_ITEM message.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seq", "uint16_t", "Sequence"),
])

MissionSetCurrent = common.message(41, "MISSION_SET_CURRENT", 28,
    "Set the mission item with sequence number seq as current item. This means that the MAV will "
    "continue to this mission item on the shortest path (not following the mission items in-between).", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seq", "uint16_t", "Sequence"),
])

MissionCurrent = common.message(42, "MISSION_CURRENT", 28,
    "Message that announces the sequence number of the current active mission item. The MAV will "
    "fly towards this mission item.", [
    Field("seq", "uint16_t", "Sequence"),
])

MissionRequestList = common.message(43, "MISSION_REQUEST_LIST", 132,
    "Request the overall list of mission items from the system/component.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
])

MissionCount = common.message(44, "MISSION_COUNT", 221,
    "This message is emitted as response to MISSION_REQUEST_LIST by the MAV and to initiate a write "
    "transaction. The GCS can then request the individual mission item based on the knowledge of the "
    "total number of waypoints.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("count", "uint16_t", "Number of mission items in the sequence"),
])

MissionClearAll = common.message(45, "MISSION_CLEAR_ALL", 232,
    "Delete all mission items at once.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
])

MissionItemReached = common.message(46, "MISSION_ITEM_REACHED", 11,
    "A certain mission item has been reached. The system will either hold this position (or circle "
    "on the orbit) or (if the autocontinue on the WP was set) continue to the next waypoint.", [
    Field("seq", "uint16_t", "Sequence"),
])

MissionAck = common.message(47, "MISSION_ACK", 153,
    "Ack message during waypoint handling. The type field states if this message is a positive ack "
    "(type=0) or if an error happened (type=non-zero).", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("type", "uint8_t", "See MAV_MISSION_RESULT enum", enum="MAV_MISSION_RESULT"),
])

SetGpsGlobalOrigin = common.message(48, "SET_GPS_GLOBAL_ORIGIN", 41,
    "As local waypoints exist, the global waypoint reference allows to transform between the local "
    "coordinate frame and the global (GPS) coordinate frame.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("latitude", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("longitude", "int32_t", "Longitude (WGS84, in degrees * 1E7"),
    Field("altitude", "int32_t", "Altitude (AMSL), in meters * 1000 (positive for up)"),
])

GpsGlobalOrigin = common.message(49, "GPS_GLOBAL_ORIGIN", 39,
    "Once the MAV sets a new GPS-Local correspondence, this message announces the origin (0,0,0) "
    "position", [
    Field("latitude", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("longitude", "int32_t", "Longitude (WGS84), in degrees * 1E7"),
    Field("altitude", "int32_t", "Altitude (AMSL), in meters * 1000 (positive for up)"),
])

ParamMapRc = common.message(50, "PARAM_MAP_RC", 78,
    "Bind a RC channel to a parameter. The parameter should change accoding to the RC channel value.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("param_id", "char[16]", "Onboard parameter id, terminated by NULL if the length is less than 16 human-readable chars"),
    Field("param_index", "int16_t", "Parameter index. Send -1 to use the param ID field as identifier (else the param id will be ignored), send -2 to disable any existing map for this rc_channel_index."),
    Field("parameter_rc_channel_index", "uint8_t", "Index of parameter RC channel. Not equal to the RC channel id. Typically correpsonds to a potentiometer-knob on the RC."),
    Field("param_value0", "float", "Initial parameter value"),
    Field("scale", "float", "Scale, maps the RC range [-1, 1] to a parameter value"),
    Field("param_value_min", "float", "Minimum param value. The protocol does not define if this overwrites an onboard minimum value."),
    Field("param_value_max", "float", "Maximum param value. The protocol does not define if this overwrites an onboard maximum value."),
])

MissionRequestInt = common.message(51, "MISSION_REQUEST_INT", 196,
    "Request the information of the mission item with the sequence number seq. The response of the "
    "system to this message should be a MISSION_ITEM_INT message.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seq", "uint16_t", "Sequence"),
])

SafetySetAllowedArea = common.message(54, "SAFETY_SET_ALLOWED_AREA", 15,
    "Set a safety zone (volume), which is defined by two corners of a cube. This message can be used "
    "to tell the MAV which setpoints/waypoints to accept and which to reject.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("frame", "uint8_t", "Coordinate frame, as defined by MAV_FRAME enum. Can be either global, GPS, right-handed with Z axis up or local, right handed, Z axis down.", enum="MAV_FRAME"),
    Field("p1x", "float", "x position 1 / Latitude 1"),
    Field("p1y", "float", "y position 1 / Longitude 1"),
    Field("p1z", "float", "z position 1 / Altitude 1"),
    Field("p2x", "float", "x position 2 / Latitude 2"),
    Field("p2y", "float", "y position 2 / Longitude 2"),
    Field("p2z", "float", "z position 2 / Altitude 2"),
])

SafetyAllowedArea = common.message(55, "SAFETY_ALLOWED_AREA", 3,
    "Read out the safety zone the MAV currently assumes.", [
    Field("frame", "uint8_t", "Coordinate frame, as defined by MAV_FRAME enum.", enum="MAV_FRAME"),
    Field("p1x", "float", "x position 1 / Latitude 1"),
    Field("p1y", "float", "y position 1 / Longitude 1"),
    Field("p1z", "float", "z position 1 / Altitude 1"),
    Field("p2x", "float", "x position 2 / Latitude 2"),
    Field("p2y", "float", "y position 2 / Longitude 2"),
    Field("p2z", "float", "z position 2 / Altitude 2"),
])

# Estimates with covariance

AttitudeQuaternionCov = common.message(61, "ATTITUDE_QUATERNION_COV", 167,
    "The attitude in the aeronautical frame (right-handed, Z-down, X-front, Y-right), expressed as "
    "quaternion. Quaternion order is w, x, y, z and a zero rotation would be expressed as (1 0 0 0).", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since system boot or since UNIX epoch)"),
    Field("q", "float[4]", "Quaternion components, w, x, y, z (1 0 0 0 is the null-rotation)"),
    Field("rollspeed", "float", "Roll angular speed (rad/s)"),
    Field("pitchspeed", "float", "Pitch angular speed (rad/s)"),
    Field("yawspeed", "float", "Yaw angular speed (rad/s)"),
    Field("covariance", "float[9]", "Attitude covariance"),
])

NavControllerOutput = common.message(62, "NAV_CONTROLLER_OUTPUT", 183,
    "The state of the fixed wing navigation and position controller.", [
    Field("nav_roll", "float", "Current desired roll in degrees"),
    Field("nav_pitch", "float", "Current desired pitch in degrees"),
    Field("nav_bearing", "int16_t", "Current desired heading in degrees"),
    Field("target_bearing", "int16_t", "Bearing to current MISSION/target in degrees"),
    Field("wp_dist", "uint16_t", "Distance to active MISSION in meters"),
    Field("alt_error", "float", "Current altitude error in meters"),
    Field("aspd_error", "float", "Current airspeed error in meters/second"),
    Field("xtrack_error", "float", "Current crosstrack error on x-y plane in meters"),
])

GlobalPositionIntCov = common.message(63, "GLOBAL_POSITION_INT_COV", 119,
    "The filtered global position (e.g. fused GPS and accelerometers). The position is in GPS-frame "
    "(right-handed, Z-up). It is designed as scaled integer message since the resolution of float is "
    "not sufficient.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since system boot or since UNIX epoch)"),
    Field("estimator_type", "uint8_t", "Class id of the estimator this estimate originated from.", enum="MAV_ESTIMATOR_TYPE"),
    Field("lat", "int32_t", "Latitude, expressed as degrees * 1E7"),
    Field("lon", "int32_t", "Longitude, expressed as degrees * 1E7"),
    Field("alt", "int32_t", "Altitude in meters, expressed as * 1000 (millimeters), above MSL"),
    Field("relative_alt", "int32_t", "Altitude above ground in meters, expressed as * 1000 (millimeters)"),
    Field("vx", "float", "Ground X Speed (Latitude), expressed as m/s"),
    Field("vy", "float", "Ground Y Speed (Longitude), expressed as m/s"),
    Field("vz", "float", "Ground Z Speed (Altitude), expressed as m/s"),
    Field("covariance", "float[36]", "Covariance matrix (first six entries are the first ROW, next six entries are the second row, etc.)"),
])

LocalPositionNedCov = common.message(64, "LOCAL_POSITION_NED_COV", 191,
    "The filtered local position (e.g. fused computer vision and accelerometers). Coordinate frame "
    "is right-handed, Z-axis down (aeronautical frame, NED / north-east-down convention)", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since system boot or since UNIX epoch)"),
    Field("estimator_type", "uint8_t", "Class id of the estimator this estimate originated from.", enum="MAV_ESTIMATOR_TYPE"),
    Field("x", "float", "X Position"),
    Field("y", "float", "Y Position"),
    Field("z", "float", "Z Position"),
    Field("vx", "float", "X Speed (m/s)"),
    Field("vy", "float", "Y Speed (m/s)"),
    Field("vz", "float", "Z Speed (m/s)"),
    Field("ax", "float", "X Acceleration (m/s^2)"),
    Field("ay", "float", "Y Acceleration (m/s^2)"),
    Field("az", "float", "Z Acceleration (m/s^2)"),
    Field("covariance", "float[45]", "Covariance matrix upper right triangular (first nine entries are the first ROW, next eight entries are the second row, etc.)"),
])

RcChannels = common.message(65, "RC_CHANNELS", 118,
    "The PPM values of the RC channels received. The standard PPM modulation is as follows: 1000 "
    "microseconds: 0%, 2000 microseconds: 100%.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("chancount", "uint8_t", "Total number of RC channels being received. This can be larger than 18, indicating that more channels are available but not given in this message. This value should be 0 when no RC channels are available."),
    Field("chan1_raw", "uint16_t", "RC channel 1 value, in microseconds. A value of UINT16_MAX implies the channel is unused."),
    Field("chan2_raw", "uint16_t", "RC channel 2 value, in microseconds"),
    Field("chan3_raw", "uint16_t", "RC channel 3 value, in microseconds"),
    Field("chan4_raw", "uint16_t", "RC channel 4 value, in microseconds"),
    Field("chan5_raw", "uint16_t", "RC channel 5 value, in microseconds"),
    Field("chan6_raw", "uint16_t", "RC channel 6 value, in microseconds"),
    Field("chan7_raw", "uint16_t", "RC channel 7 value, in microseconds"),
    Field("chan8_raw", "uint16_t", "RC channel 8 value, in microseconds"),
    Field("chan9_raw", "uint16_t", "RC channel 9 value, in microseconds"),
    Field("chan10_raw", "uint16_t", "RC channel 10 value, in microseconds"),
    Field("chan11_raw", "uint16_t", "RC channel 11 value, in microseconds"),
    Field("chan12_raw", "uint16_t", "RC channel 12 value, in microseconds"),
    Field("chan13_raw", "uint16_t", "RC channel 13 value, in microseconds"),
    Field("chan14_raw", "uint16_t", "RC channel 14 value, in microseconds"),
    Field("chan15_raw", "uint16_t", "RC channel 15 value, in microseconds"),
    Field("chan16_raw", "uint16_t", "RC channel 16 value, in microseconds"),
    Field("chan17_raw", "uint16_t", "RC channel 17 value, in microseconds"),
    Field("chan18_raw", "uint16_t", "RC channel 18 value, in microseconds"),
    Field("rssi", "uint8_t", "Receive signal strength indicator, 0: 0%, 100: 100%, 255: invalid/unknown."),
])

RequestDataStream = common.message(66, "REQUEST_DATA_STREAM", 148,
    "THIS INTERFACE IS DEPRECATED. USE SET_MESSAGE_INTERVAL INSTEAD.", [
    Field("target_system", "uint8_t", "The target requested to send the message stream."),
    Field("target_component", "uint8_t", "The target requested to send the message stream."),
    Field("req_stream_id", "uint8_t", "The ID of the requested data stream"),
    Field("req_message_rate", "uint16_t", "The requested message rate"),
    Field("start_stop", "uint8_t", "1 to start sending, 0 to stop sending."),
])

DataStream = common.message(67, "DATA_STREAM", 21,
    "THIS INTERFACE IS DEPRECATED. USE MESSAGE_INTERVAL INSTEAD.", [
    Field("stream_id", "uint8_t", "The ID of the requested data stream"),
    Field("message_rate", "uint16_t", "The message rate"),
    Field("on_off", "uint8_t", "1 stream is enabled, 0 stream is stopped."),
])

ManualControl = common.message(69, "MANUAL_CONTROL", 243,
    "This message provides an API for manually controlling the vehicle using standard joystick axes "
    "nomenclature, along with a joystick-like input device.", [
    Field("target", "uint8_t", "The system to be controlled."),
    Field("x", "int16_t", "X-axis, normalized to the range [-1000,1000]. A value of INT16_MAX indicates that this axis is invalid."),
    Field("y", "int16_t", "Y-axis, normalized to the range [-1000,1000]. A value of INT16_MAX indicates that this axis is invalid."),
    Field("z", "int16_t", "Z-axis, normalized to the range [-1000,1000]. A value of INT16_MAX indicates that this axis is invalid."),
    Field("r", "int16_t", "R-axis, normalized to the range [-1000,1000]. A value of INT16_MAX indicates that this axis is invalid."),
    Field("buttons", "uint16_t", "A bitfield corresponding to the joystick buttons' current state, 1 for pressed, 0 for released."),
])

RcChannelsOverride = common.message(70, "RC_CHANNELS_OVERRIDE", 124,
    "The RAW values of the RC channels sent to the MAV to override info received from the RC radio. "
    "A value of UINT16_MAX means no change to that channel. A value of 0 means control of that "
    "channel should be released back to the RC radio.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("chan1_raw", "uint16_t", "RC channel 1 value, in microseconds. A value of UINT16_MAX means to ignore this field."),
    Field("chan2_raw", "uint16_t", "RC channel 2 value, in microseconds"),
    Field("chan3_raw", "uint16_t", "RC channel 3 value, in microseconds"),
    Field("chan4_raw", "uint16_t", "RC channel 4 value, in microseconds"),
    Field("chan5_raw", "uint16_t", "RC channel 5 value, in microseconds"),
    Field("chan6_raw", "uint16_t", "RC channel 6 value, in microseconds"),
    Field("chan7_raw", "uint16_t", "RC channel 7 value, in microseconds"),
    Field("chan8_raw", "uint16_t", "RC channel 8 value, in microseconds"),
])

MissionItemInt = common.message(73, "MISSION_ITEM_INT", 38,
    "Message encoding a mission item. This message is emitted to announce the presence of a mission "
    "item and to set a mission item on the system. The mission item can be either in x, y, z meters "
    "(type: LOCAL) or x:lat, y:lon, z:altitude.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("seq", "uint16_t", "Waypoint ID (sequence number). Starts at zero. Increases monotonically for each waypoint, no gaps in the sequence (0,1,2,3,4)."),
    Field("frame", "uint8_t", "The coordinate system of the waypoint.", enum="MAV_FRAME"),
    Field("command", "uint16_t", "The scheduled action for the waypoint.", enum="MAV_CMD"),
    Field("current", "uint8_t", "false:0, true:1"),
    Field("autocontinue", "uint8_t", "autocontinue to next wp"),
    Field("param1", "float", "PARAM1, see MAV_CMD enum"),
    Field("param2", "float", "PARAM2, see MAV_CMD enum"),
    Field("param3", "float", "PARAM3, see MAV_CMD enum"),
    Field("param4", "float", "PARAM4, see MAV_CMD enum"),
    Field("x", "int32_t", "PARAM5 / local: x position in meters * 1e4, global: latitude in degrees * 10^7"),
    Field("y", "int32_t", "PARAM6 / y position: local: x position in meters * 1e4, global: longitude in degrees *10^7"),
    Field("z", "float", "PARAM7 / z position: global: altitude in meters (relative or absolute, depending on frame."),
])

VfrHud = common.message(74, "VFR_HUD", 20,
    "Metrics typically displayed on a HUD for fixed wing aircraft", [
    Field("airspeed", "float", "Current airspeed in m/s"),
    Field("groundspeed", "float", "Current ground speed in m/s"),
    Field("heading", "int16_t", "Current heading in degrees, in compass units (0..360, 0=north)"),
    Field("throttle", "uint16_t", "Current throttle setting in integer percent, 0 to 100"),
    Field("alt", "float", "Current altitude (MSL), in meters"),
    Field("climb", "float", "Current climb rate in meters/second"),
])

# Commands

CommandInt = common.message(75, "COMMAND_INT", 158,
    "Message encoding a command with parameters as scaled integers. Scaling depends on the actual "
    "command value.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("frame", "uint8_t", "The coordinate system of the COMMAND.", enum="MAV_FRAME"),
    Field("command", "uint16_t", "The scheduled action for the mission item.", enum="MAV_CMD"),
    Field("current", "uint8_t", "false:0, true:1"),
    Field("autocontinue", "uint8_t", "autocontinue to next wp"),
    Field("param1", "float", "PARAM1, see MAV_CMD enum"),
    Field("param2", "float", "PARAM2, see MAV_CMD enum"),
    Field("param3", "float", "PARAM3, see MAV_CMD enum"),
    Field("param4", "float", "PARAM4, see MAV_CMD enum"),
    Field("x", "int32_t", "PARAM5 / local: x position in meters * 1e4, global: latitude in degrees * 10^7"),
    Field("y", "int32_t", "PARAM6 / local: y position in meters * 1e4, global: longitude in degrees * 10^7"),
    Field("z", "float", "PARAM7 / z position: global: altitude in meters (relative or absolute, depending on frame."),
])

CommandLong = common.message(76, "COMMAND_LONG", 152,
    "Send a command with up to seven parameters to the MAV", [
    Field("target_system", "uint8_t", "System which should execute the command"),
    Field("target_component", "uint8_t", "Component which should execute the command, 0 for all components"),
    Field("command", "uint16_t", "Command ID, as defined by MAV_CMD enum.", enum="MAV_CMD"),
    Field("confirmation", "uint8_t", "0: First transmission of this command. 1-255: Confirmation transmissions (e.g. for kill command)"),
    Field("param1", "float", "Parameter 1, as defined by MAV_CMD enum."),
    Field("param2", "float", "Parameter 2, as defined by MAV_CMD enum."),
    Field("param3", "float", "Parameter 3, as defined by MAV_CMD enum."),
    Field("param4", "float", "Parameter 4, as defined by MAV_CMD enum."),
    Field("param5", "float", "Parameter 5, as defined by MAV_CMD enum."),
    Field("param6", "float", "Parameter 6, as defined by MAV_CMD enum."),
    Field("param7", "float", "Parameter 7, as defined by MAV_CMD enum."),
])

CommandAck = common.message(77, "COMMAND_ACK", 143,
    "Report status of a command. Includes feedback whether the command was executed.", [
    Field("command", "uint16_t", "Command ID, as defined by MAV_CMD enum.", enum="MAV_CMD"),
    Field("result", "uint8_t", "See MAV_RESULT enum", enum="MAV_RESULT"),
])

ManualSetpoint = common.message(81, "MANUAL_SETPOINT", 106,
    "Setpoint in roll, pitch, yaw and thrust from the operator", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot"),
    Field("roll", "float", "Desired roll rate in radians per second"),
    Field("pitch", "float", "Desired pitch rate in radians per second"),
    Field("yaw", "float", "Desired yaw rate in radians per second"),
    Field("thrust", "float", "Collective thrust, normalized to 0 .. 1"),
    Field("mode_switch", "uint8_t", "Flight mode switch position, 0.. 255"),
    Field("manual_override_switch", "uint8_t", "Override mode switch position, 0.. 255"),
])

SetAttitudeTarget = common.message(82, "SET_ATTITUDE_TARGET", 49,
    "Sets a desired vehicle attitude. Used by an external controller to command the vehicle (manual "
    "controller or other system).", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot"),
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("type_mask", "uint8_t", "Mappings: If any of these bits are set, the corresponding input should be ignored: bit 1: body roll rate, bit 2: body pitch rate, bit 3: body yaw rate. bit 4-bit 6: reserved, bit 7: throttle, bit 8: attitude"),
    Field("q", "float[4]", "Attitude quaternion (w, x, y, z order, zero-rotation is 1, 0, 0, 0)"),
    Field("body_roll_rate", "float", "Body roll rate in radians per second"),
    Field("body_pitch_rate", "float", "Body roll rate in radians per second"),
    Field("body_yaw_rate", "float", "Body roll rate in radians per second"),
    Field("thrust", "float", "Collective thrust, normalized to 0 .. 1 (-1 .. 1 for vehicles capable of reverse trust)"),
])

AttitudeTarget = common.message(83, "ATTITUDE_TARGET", 22,
    "Reports the current commanded attitude of the vehicle as specified by the autopilot. This "
    "should match the commands sent in a SET_ATTITUDE_TARGET message if the vehicle is being "
    "controlled this way.", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot"),
    Field("type_mask", "uint8_t", "Mappings: If any of these bits are set, the corresponding input should be ignored: bit 1: body roll rate, bit 2: body pitch rate, bit 3: body yaw rate. bit 4-bit 7: reserved, bit 8: attitude"),
    Field("q", "float[4]", "Attitude quaternion (w, x, y, z order, zero-rotation is 1, 0, 0, 0)"),
    Field("body_roll_rate", "float", "Body roll rate in radians per second"),
    Field("body_pitch_rate", "float", "Body pitch rate in radians per second"),
    Field("body_yaw_rate", "float", "Body yaw rate in radians per second"),
    Field("thrust", "float", "Collective thrust, normalized to 0 .. 1 (-1 .. 1 for vehicles capable of reverse trust)"),
])

SetPositionTargetLocalNed = common.message(84, "SET_POSITION_TARGET_LOCAL_NED", 143,
    "Sets a desired vehicle position in a local north-east-down coordinate frame. Used by an "
    "external controller to command the vehicle (manual controller or other system).", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot"),
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("coordinate_frame", "uint8_t", "Valid options are: MAV_FRAME_LOCAL_NED = 1, MAV_FRAME_LOCAL_OFFSET_NED = 7, MAV_FRAME_BODY_NED = 8, MAV_FRAME_BODY_OFFSET_NED = 9", enum="MAV_FRAME"),
    Field("type_mask", "uint16_t", "Bitmask to indicate which dimensions should be ignored by the vehicle.", enum="POSITION_TARGET_TYPEMASK"),
    Field("x", "float", "X Position in NED frame in meters"),
    Field("y", "float", "Y Position in NED frame in meters"),
    Field("z", "float", "Z Position in NED frame in meters (note, altitude is negative in NED)"),
    Field("vx", "float", "X velocity in NED frame in meter / s"),
    Field("vy", "float", "Y velocity in NED frame in meter / s"),
    Field("vz", "float", "Z velocity in NED frame in meter / s"),
    Field("afx", "float", "X acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afy", "float", "Y acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afz", "float", "Z acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("yaw", "float", "yaw setpoint in rad"),
    Field("yaw_rate", "float", "yaw rate setpoint in rad/s"),
])

PositionTargetLocalNed = common.message(85, "POSITION_TARGET_LOCAL_NED", 140,
    "Reports the current commanded vehicle position, velocity, and acceleration as specified by the "
    "autopilot.", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot"),
    Field("coordinate_frame", "uint8_t", "Valid options are: MAV_FRAME_LOCAL_NED = 1, MAV_FRAME_LOCAL_OFFSET_NED = 7, MAV_FRAME_BODY_NED = 8, MAV_FRAME_BODY_OFFSET_NED = 9", enum="MAV_FRAME"),
    Field("type_mask", "uint16_t", "Bitmask to indicate which dimensions should be ignored by the vehicle.", enum="POSITION_TARGET_TYPEMASK"),
    Field("x", "float", "X Position in NED frame in meters"),
    Field("y", "float", "Y Position in NED frame in meters"),
    Field("z", "float", "Z Position in NED frame in meters (note, altitude is negative in NED)"),
    Field("vx", "float", "X velocity in NED frame in meter / s"),
    Field("vy", "float", "Y velocity in NED frame in meter / s"),
    Field("vz", "float", "Z velocity in NED frame in meter / s"),
    Field("afx", "float", "X acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afy", "float", "Y acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afz", "float", "Z acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("yaw", "float", "yaw setpoint in rad"),
    Field("yaw_rate", "float", "yaw rate setpoint in rad/s"),
])

SetPositionTargetGlobalInt = common.message(86, "SET_POSITION_TARGET_GLOBAL_INT", 5,
    "Sets a desired vehicle position, velocity, and/or acceleration in a global coordinate system "
    "(WGS84). Used by an external controller to command the vehicle (manual controller or other "
    "system).", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot."),
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("coordinate_frame", "uint8_t", "Valid options are: MAV_FRAME_GLOBAL_INT = 5, MAV_FRAME_GLOBAL_RELATIVE_ALT_INT = 6, MAV_FRAME_GLOBAL_TERRAIN_ALT_INT = 11", enum="MAV_FRAME"),
    Field("type_mask", "uint16_t", "Bitmask to indicate which dimensions should be ignored by the vehicle.", enum="POSITION_TARGET_TYPEMASK"),
    Field("lat_int", "int32_t", "X Position in WGS84 frame in 1e7 * degrees"),
    Field("lon_int", "int32_t", "Y Position in WGS84 frame in 1e7 * degrees"),
    Field("alt", "float", "Altitude in meters in AMSL altitude, not WGS84 if absolute or relative, above terrain if GLOBAL_TERRAIN_ALT_INT"),
    Field("vx", "float", "X velocity in NED frame in meter / s"),
    Field("vy", "float", "Y velocity in NED frame in meter / s"),
    Field("vz", "float", "Z velocity in NED frame in meter / s"),
    Field("afx", "float", "X acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afy", "float", "Y acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afz", "float", "Z acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("yaw", "float", "yaw setpoint in rad"),
    Field("yaw_rate", "float", "yaw rate setpoint in rad/s"),
])

PositionTargetGlobalInt = common.message(87, "POSITION_TARGET_GLOBAL_INT", 150,
    "Reports the current commanded vehicle position, velocity, and acceleration as specified by the "
    "autopilot.", [
    Field("time_boot_ms", "uint32_t", "Timestamp in milliseconds since system boot."),
    Field("coordinate_frame", "uint8_t", "Valid options are: MAV_FRAME_GLOBAL_INT = 5, MAV_FRAME_GLOBAL_RELATIVE_ALT_INT = 6, MAV_FRAME_GLOBAL_TERRAIN_ALT_INT = 11", enum="MAV_FRAME"),
    Field("type_mask", "uint16_t", "Bitmask to indicate which dimensions should be ignored by the vehicle.", enum="POSITION_TARGET_TYPEMASK"),
    Field("lat_int", "int32_t", "X Position in WGS84 frame in 1e7 * degrees"),
    Field("lon_int", "int32_t", "Y Position in WGS84 frame in 1e7 * degrees"),
    Field("alt", "float", "Altitude in meters in AMSL altitude, not WGS84 if absolute or relative, above terrain if GLOBAL_TERRAIN_ALT_INT"),
    Field("vx", "float", "X velocity in NED frame in meter / s"),
    Field("vy", "float", "Y velocity in NED frame in meter / s"),
    Field("vz", "float", "Z velocity in NED frame in meter / s"),
    Field("afx", "float", "X acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afy", "float", "Y acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("afz", "float", "Z acceleration or force (if bit 10 of type_mask is set) in NED frame in meter / s^2 or N"),
    Field("yaw", "float", "yaw setpoint in rad"),
    Field("yaw_rate", "float", "yaw rate setpoint in rad/s"),
])

LocalPositionNedSystemGlobalOffset = common.message(89, "LOCAL_POSITION_NED_SYSTEM_GLOBAL_OFFSET", 231,
    "The offset in X, Y, Z and yaw between the LOCAL_POSITION_NED messages of MAV X and the global "
    "coordinate frame in NED coordinates.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("x", "float", "X Position"),
    Field("y", "float", "Y Position"),
    Field("z", "float", "Z Position"),
    Field("roll", "float", "Roll"),
    Field("pitch", "float", "Pitch"),
    Field("yaw", "float", "Yaw"),
])

# Hardware in the loop

HilState = common.message(90, "HIL_STATE", 183,
    "DEPRECATED PACKET! Suffers from missing airspeed fields and singularities due to Euler angles. "
    "Please use HIL_STATE_QUATERNION instead. Sent from simulation to autopilot.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("roll", "float", "Roll angle (rad)"),
    Field("pitch", "float", "Pitch angle (rad)"),
    Field("yaw", "float", "Yaw angle (rad)"),
    Field("rollspeed", "float", "Body frame roll / phi angular speed (rad/s)"),
    Field("pitchspeed", "float", "Body frame pitch / theta angular speed (rad/s)"),
    Field("yawspeed", "float", "Body frame yaw / psi angular speed (rad/s)"),
    Field("lat", "int32_t", "Latitude, expressed as * 1E7"),
    Field("lon", "int32_t", "Longitude, expressed as * 1E7"),
    Field("alt", "int32_t", "Altitude in meters, expressed as * 1000 (millimeters)"),
    Field("vx", "int16_t", "Ground X Speed (Latitude), expressed as m/s * 100"),
    Field("vy", "int16_t", "Ground Y Speed (Longitude), expressed as m/s * 100"),
    Field("vz", "int16_t", "Ground Z Speed (Altitude), expressed as m/s * 100"),
    Field("xacc", "int16_t", "X acceleration (mg)"),
    Field("yacc", "int16_t", "Y acceleration (mg)"),
    Field("zacc", "int16_t", "Z acceleration (mg)"),
])

HilControls = common.message(91, "HIL_CONTROLS", 63,
    "Sent from autopilot to simulation. Hardware in the loop control outputs", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("roll_ailerons", "float", "Control output -1 .. 1"),
    Field("pitch_elevator", "float", "Control output -1 .. 1"),
    Field("yaw_rudder", "float", "Control output -1 .. 1"),
    Field("throttle", "float", "Throttle 0 .. 1"),
    Field("aux1", "float", "Aux 1, -1 .. 1"),
    Field("aux2", "float", "Aux 2, -1 .. 1"),
    Field("aux3", "float", "Aux 3, -1 .. 1"),
    Field("aux4", "float", "Aux 4, -1 .. 1"),
    Field("mode", "uint8_t", "System mode.", enum="MAV_MODE"),
    Field("nav_mode", "uint8_t", "Navigation mode (MAV_NAV_MODE)"),
])

HilRcInputsRaw = common.message(92, "HIL_RC_INPUTS_RAW", 54,
    "Sent from simulation to autopilot. The RAW values of the RC channels received. The standard PPM "
    "modulation is as follows: 1000 microseconds: 0%, 2000 microseconds: 100%.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("chan1_raw", "uint16_t", "RC channel 1 value, in microseconds"),
    Field("chan2_raw", "uint16_t", "RC channel 2 value, in microseconds"),
    Field("chan3_raw", "uint16_t", "RC channel 3 value, in microseconds"),
    Field("chan4_raw", "uint16_t", "RC channel 4 value, in microseconds"),
    Field("chan5_raw", "uint16_t", "RC channel 5 value, in microseconds"),
    Field("chan6_raw", "uint16_t", "RC channel 6 value, in microseconds"),
    Field("chan7_raw", "uint16_t", "RC channel 7 value, in microseconds"),
    Field("chan8_raw", "uint16_t", "RC channel 8 value, in microseconds"),
    Field("chan9_raw", "uint16_t", "RC channel 9 value, in microseconds"),
    Field("chan10_raw", "uint16_t", "RC channel 10 value, in microseconds"),
    Field("chan11_raw", "uint16_t", "RC channel 11 value, in microseconds"),
    Field("chan12_raw", "uint16_t", "RC channel 12 value, in microseconds"),
    Field("rssi", "uint8_t", "Receive signal strength indicator, 0: 0%, 255: 100%"),
])

HilActuatorControls = common.message(93, "HIL_ACTUATOR_CONTROLS", 47,
    "Sent from autopilot to simulation. Hardware in the loop control outputs (replacement for "
    "HIL_CONTROLS)", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("controls", "float[16]", "Control outputs -1 .. 1. Channel assignment depends on the simulated hardware."),
    Field("mode", "uint8_t", "System mode (MAV_MODE), includes arming state.", enum="MAV_MODE_FLAG"),
    Field("flags", "uint64_t", "Flags as bitfield, reserved for future use."),
])

# Vision and optical flow

OpticalFlow = common.message(100, "OPTICAL_FLOW", 175,
    "Optical flow from a flow sensor (e.g. optical mouse sensor)", [
    Field("time_usec", "uint64_t", "Timestamp (UNIX)"),
    Field("sensor_id", "uint8_t", "Sensor ID"),
    Field("flow_x", "int16_t", "Flow in pixels * 10 in x-sensor direction (dezi-pixels)"),
    Field("flow_y", "int16_t", "Flow in pixels * 10 in y-sensor direction (dezi-pixels)"),
    Field("flow_comp_m_x", "float", "Flow in meters in x-sensor direction, angular-speed compensated"),
    Field("flow_comp_m_y", "float", "Flow in meters in y-sensor direction, angular-speed compensated"),
    Field("quality", "uint8_t", "Optical flow quality / confidence. 0: bad, 255: maximum quality"),
    Field("ground_distance", "float", "Ground distance in meters. Positive value: distance known. Negative value: Unknown distance"),
])

GlobalVisionPositionEstimate = common.message(101, "GLOBAL_VISION_POSITION_ESTIMATE", 102,
    "Global position and attitude estimate from a vision source.", [
    Field("usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("x", "float", "Global X position"),
    Field("y", "float", "Global Y position"),
    Field("z", "float", "Global Z position"),
    Field("roll", "float", "Roll angle in rad"),
    Field("pitch", "float", "Pitch angle in rad"),
    Field("yaw", "float", "Yaw angle in rad"),
])

VisionPositionEstimate = common.message(102, "VISION_POSITION_ESTIMATE", 158,
    "Local position and attitude estimate from a vision source.", [
    Field("usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("x", "float", "Global X position"),
    Field("y", "float", "Global Y position"),
    Field("z", "float", "Global Z position"),
    Field("roll", "float", "Roll angle in rad"),
    Field("pitch", "float", "Pitch angle in rad"),
    Field("yaw", "float", "Yaw angle in rad"),
])

VisionSpeedEstimate = common.message(103, "VISION_SPEED_ESTIMATE", 208,
    "Speed estimate from a vision source.", [
    Field("usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("x", "float", "Global X speed"),
    Field("y", "float", "Global Y speed"),
    Field("z", "float", "Global Z speed"),
])

ViconPositionEstimate = common.message(104, "VICON_POSITION_ESTIMATE", 56,
    "Global position estimate from a Vicon motion system source.", [
    Field("usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("x", "float", "Global X position"),
    Field("y", "float", "Global Y position"),
    Field("z", "float", "Global Z position"),
    Field("roll", "float", "Roll angle in rad"),
    Field("pitch", "float", "Pitch angle in rad"),
    Field("yaw", "float", "Yaw angle in rad"),
])

HighresImu = common.message(105, "HIGHRES_IMU", 93,
    "The IMU readings in SI units in NED body frame", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("xacc", "float", "X acceleration (m/s^2)"),
    Field("yacc", "float", "Y acceleration (m/s^2)"),
    Field("zacc", "float", "Z acceleration (m/s^2)"),
    Field("xgyro", "float", "Angular speed around X axis (rad / sec)"),
    Field("ygyro", "float", "Angular speed around Y axis (rad / sec)"),
    Field("zgyro", "float", "Angular speed around Z axis (rad / sec)"),
    Field("xmag", "float", "X Magnetic field (Gauss)"),
    Field("ymag", "float", "Y Magnetic field (Gauss)"),
    Field("zmag", "float", "Z Magnetic field (Gauss)"),
    Field("abs_pressure", "float", "Absolute pressure in millibar"),
    Field("diff_pressure", "float", "Differential pressure in millibar"),
    Field("pressure_alt", "float", "Altitude calculated from pressure"),
    Field("temperature", "float", "Temperature in degrees celsius"),
    Field("fields_updated", "uint16_t", "Bitmask for fields that have updated since last message, bit 0 = xacc, bit 12: temperature"),
])

OpticalFlowRad = common.message(106, "OPTICAL_FLOW_RAD", 138,
    "Optical flow from an angular rate flow sensor (e.g. PX4FLOW or mouse sensor)", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("sensor_id", "uint8_t", "Sensor ID"),
    Field("integration_time_us", "uint32_t", "Integration time in microseconds. Divide integrated_x and integrated_y by the integration time to obtain average flow."),
    Field("integrated_x", "float", "Flow in radians around X axis (Sensor RH rotation about the X axis induces a positive flow."),
    Field("integrated_y", "float", "Flow in radians around Y axis (Sensor RH rotation about the Y axis induces a positive flow."),
    Field("integrated_xgyro", "float", "RH rotation around X axis (rad)"),
    Field("integrated_ygyro", "float", "RH rotation around Y axis (rad)"),
    Field("integrated_zgyro", "float", "RH rotation around Z axis (rad)"),
    Field("temperature", "int16_t", "Temperature * 100 in centi-degrees Celsius"),
    Field("quality", "uint8_t", "Optical flow quality / confidence. 0: no valid flow, 255: maximum quality"),
    Field("time_delta_distance_us", "uint32_t", "Time in microseconds since the distance was sampled."),
    Field("distance", "float", "Distance to the center of the flow field in meters. Positive value (including zero): distance known. Negative value: Unknown distance."),
])

HilSensor = common.message(107, "HIL_SENSOR", 108,
    "The IMU readings in SI units in NED body frame", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("xacc", "float", "X acceleration (m/s^2)"),
    Field("yacc", "float", "Y acceleration (m/s^2)"),
    Field("zacc", "float", "Z acceleration (m/s^2)"),
    Field("xgyro", "float", "Angular speed around X axis in body frame (rad / sec)"),
    Field("ygyro", "float", "Angular speed around Y axis in body frame (rad / sec)"),
    Field("zgyro", "float", "Angular speed around Z axis in body frame (rad / sec)"),
    Field("xmag", "float", "X Magnetic field (Gauss)"),
    Field("ymag", "float", "Y Magnetic field (Gauss)"),
    Field("zmag", "float", "Z Magnetic field (Gauss)"),
    Field("abs_pressure", "float", "Absolute pressure in millibar"),
    Field("diff_pressure", "float", "Differential pressure (airspeed) in millibar"),
    Field("pressure_alt", "float", "Altitude calculated from pressure"),
    Field("temperature", "float", "Temperature in degrees celsius"),
    Field("fields_updated", "uint32_t", "Bitmask for fields that have updated since last message, bit 0 = xacc, bit 12: temperature, bit 31: full reset of attitude/position/velocities/etc was performed in sim."),
])

SimState = common.message(108, "SIM_STATE", 32,
    "Status of simulation environment, if used", [
    Field("q1", "float", "True attitude quaternion component 1, w (1 in null-rotation)"),
    Field("q2", "float", "True attitude quaternion component 2, x (0 in null-rotation)"),
    Field("q3", "float", "True attitude quaternion component 3, y (0 in null-rotation)"),
    Field("q4", "float", "True attitude quaternion component 4, z (0 in null-rotation)"),
    Field("roll", "float", "Attitude roll expressed as Euler angles, not recommended except for human-readable outputs"),
    Field("pitch", "float", "Attitude pitch expressed as Euler angles, not recommended except for human-readable outputs"),
    Field("yaw", "float", "Attitude yaw expressed as Euler angles, not recommended except for human-readable outputs"),
    Field("xacc", "float", "X acceleration m/s/s"),
    Field("yacc", "float", "Y acceleration m/s/s"),
    Field("zacc", "float", "Z acceleration m/s/s"),
    Field("xgyro", "float", "Angular speed around X axis rad/s"),
    Field("ygyro", "float", "Angular speed around Y axis rad/s"),
    Field("zgyro", "float", "Angular speed around Z axis rad/s"),
    Field("lat", "float", "Latitude in degrees"),
    Field("lon", "float", "Longitude in degrees"),
    Field("alt", "float", "Altitude in meters"),
    Field("std_dev_horz", "float", "Horizontal position standard deviation"),
    Field("std_dev_vert", "float", "Vertical position standard deviation"),
    Field("vn", "float", "True velocity in m/s in NORTH direction in earth-fixed NED frame"),
    Field("ve", "float", "True velocity in m/s in EAST direction in earth-fixed NED frame"),
    Field("vd", "float", "True velocity in m/s in DOWN direction in earth-fixed NED frame"),
])

RadioStatus = common.message(109, "RADIO_STATUS", 185,
    "Status generated by radio and injected into MAVLink stream.", [
    Field("rssi", "uint8_t", "Local signal strength"),
    Field("remrssi", "uint8_t", "Remote signal strength"),
    Field("txbuf", "uint8_t", "Remaining free buffer space in percent."),
    Field("noise", "uint8_t", "Background noise level"),
    Field("remnoise", "uint8_t", "Remote background noise level"),
    Field("rxerrors", "uint16_t", "Receive errors"),
    Field("fixed", "uint16_t", "Count of error corrected packets"),
])

FileTransferProtocol = common.message(110, "FILE_TRANSFER_PROTOCOL", 84,
    "File transfer message", [
    Field("target_network", "uint8_t", "Network ID (0 for broadcast)"),
    Field("target_system", "uint8_t", "System ID (0 for broadcast)"),
    Field("target_component", "uint8_t", "Component ID (0 for broadcast)"),
    Field("payload", "uint8_t[251]", "Variable length payload. The length is defined by the remaining message length when subtracting the header and other fields."),
])

Timesync = common.message(111, "TIMESYNC", 34,
    "Time synchronization message.", [
    Field("tc1", "int64_t", "Time sync timestamp 1"),
    Field("ts1", "int64_t", "Time sync timestamp 2"),
])

CameraTrigger = common.message(112, "CAMERA_TRIGGER", 174,
    "Camera-IMU triggering and synchronisation message.", [
    Field("time_usec", "uint64_t", "Timestamp for the image frame in microseconds"),
    Field("seq", "uint32_t", "Image frame sequence"),
])

HilGps = common.message(113, "HIL_GPS", 124,
    "The global position, as returned by the Global Positioning System (GPS). This is NOT the global "
    "position estimate of the sytem, but rather a RAW sensor value.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("fix_type", "uint8_t", "0-1: no fix, 2: 2D fix, 3: 3D fix. Some applications will not use the value of this field unless it is at least two, so always correctly fill in the fix."),
    Field("lat", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("lon", "int32_t", "Longitude (WGS84), in degrees * 1E7"),
    Field("alt", "int32_t", "Altitude (AMSL, not WGS84), in meters * 1000 (positive for up)"),
    Field("eph", "uint16_t", "GPS HDOP horizontal dilution of position in cm (m*100). If unknown, set to: 65535"),
    Field("epv", "uint16_t", "GPS VDOP vertical dilution of position in cm (m*100). If unknown, set to: 65535"),
    Field("vel", "uint16_t", "GPS ground speed in cm/s. If unknown, set to: 65535"),
    Field("vn", "int16_t", "GPS velocity in cm/s in NORTH direction in earth-fixed NED frame"),
    Field("ve", "int16_t", "GPS velocity in cm/s in EAST direction in earth-fixed NED frame"),
    Field("vd", "int16_t", "GPS velocity in cm/s in DOWN direction in earth-fixed NED frame"),
    Field("cog", "uint16_t", "Course over ground (NOT heading, but direction of movement) in degrees * 100, 0.0..359.99 degrees. If unknown, set to: 65535"),
    Field("satellites_visible", "uint8_t", "Number of satellites visible. If unknown, set to 255"),
])

HilOpticalFlow = common.message(114, "HIL_OPTICAL_FLOW", 237,
    "Simulated optical flow from a flow sensor (e.g. PX4FLOW or optical mouse sensor)", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds, synced to UNIX time or since system boot)"),
    Field("sensor_id", "uint8_t", "Sensor ID"),
    Field("integration_time_us", "uint32_t", "Integration time in microseconds. Divide integrated_x and integrated_y by the integration time to obtain average flow."),
    Field("integrated_x", "float", "Flow in radians around X axis (Sensor RH rotation about the X axis induces a positive flow."),
    Field("integrated_y", "float", "Flow in radians around Y axis (Sensor RH rotation about the Y axis induces a positive flow."),
    Field("integrated_xgyro", "float", "RH rotation around X axis (rad)"),
    Field("integrated_ygyro", "float", "RH rotation around Y axis (rad)"),
    Field("integrated_zgyro", "float", "RH rotation around Z axis (rad)"),
    Field("temperature", "int16_t", "Temperature * 100 in centi-degrees Celsius"),
    Field("quality", "uint8_t", "Optical flow quality / confidence. 0: no valid flow, 255: maximum quality"),
    Field("time_delta_distance_us", "uint32_t", "Time in microseconds since the distance was sampled."),
    Field("distance", "float", "Distance to the center of the flow field in meters. Positive value (including zero): distance known. Negative value: Unknown distance."),
])

HilStateQuaternion = common.message(115, "HIL_STATE_QUATERNION", 4,
    "Sent from simulation to autopilot, avoids in contrast to HIL_STATE singularities. This packet is "
    "useful for high throughput applications such as hardware in the loop simulations.", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("attitude_quaternion", "float[4]", "Vehicle attitude expressed as normalized quaternion in w, x, y, z order (with 1 0 0 0 being the null-rotation)"),
    Field("rollspeed", "float", "Body frame roll / phi angular speed (rad/s)"),
    Field("pitchspeed", "float", "Body frame pitch / theta angular speed (rad/s)"),
    Field("yawspeed", "float", "Body frame yaw / psi angular speed (rad/s)"),
    Field("lat", "int32_t", "Latitude, expressed as * 1E7"),
    Field("lon", "int32_t", "Longitude, expressed as * 1E7"),
    Field("alt", "int32_t", "Altitude in meters, expressed as * 1000 (millimeters)"),
    Field("vx", "int16_t", "Ground X Speed (Latitude), expressed as cm/s"),
    Field("vy", "int16_t", "Ground Y Speed (Longitude), expressed as cm/s"),
    Field("vz", "int16_t", "Ground Z Speed (Altitude), expressed as cm/s"),
    Field("ind_airspeed", "uint16_t", "Indicated airspeed, expressed as cm/s"),
    Field("true_airspeed", "uint16_t", "True airspeed, expressed as cm/s"),
    Field("xacc", "int16_t", "X acceleration (mg)"),
    Field("yacc", "int16_t", "Y acceleration (mg)"),
    Field("zacc", "int16_t", "Z acceleration (mg)"),
])

ScaledImu2 = common.message(116, "SCALED_IMU2", 76,
    "The RAW IMU readings for secondary 9DOF sensor setup. This message should contain the scaled "
    "values to the described units", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("xacc", "int16_t", "X acceleration (mg)"),
    Field("yacc", "int16_t", "Y acceleration (mg)"),
    Field("zacc", "int16_t", "Z acceleration (mg)"),
    Field("xgyro", "int16_t", "Angular speed around X axis (millirad /sec)"),
    Field("ygyro", "int16_t", "Angular speed around Y axis (millirad /sec)"),
    Field("zgyro", "int16_t", "Angular speed around Z axis (millirad /sec)"),
    Field("xmag", "int16_t", "X Magnetic field (milli tesla)"),
    Field("ymag", "int16_t", "Y Magnetic field (milli tesla)"),
    Field("zmag", "int16_t", "Z Magnetic field (milli tesla)"),
])

# Onboard logs

LogRequestList = common.message(117, "LOG_REQUEST_LIST", 128,
    "Request a list of available logs. On some systems calling this may stop on-board logging until "
    "LOG_REQUEST_END is called.", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("start", "uint16_t", "First log id (0 for first available)"),
    Field("end", "uint16_t", "Last log id (0xffff for last available)"),
])

LogEntry = common.message(118, "LOG_ENTRY", 56,
    "Reply to LOG_REQUEST_LIST", [
    Field("id", "uint16_t", "Log id"),
    Field("num_logs", "uint16_t", "Total number of logs"),
    Field("last_log_num", "uint16_t", "High log number"),
    Field("time_utc", "uint32_t", "UTC timestamp of log in seconds since 1970, or 0 if not available"),
    Field("size", "uint32_t", "Size of the log (may be approximate) in bytes"),
])

LogRequestData = common.message(119, "LOG_REQUEST_DATA", 116,
    "Request a chunk of a log", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("id", "uint16_t", "Log id (from LOG_ENTRY reply)"),
    Field("ofs", "uint32_t", "Offset into the log"),
    Field("count", "uint32_t", "Number of bytes"),
])

LogData = common.message(120, "LOG_DATA", 134,
    "Reply to LOG_REQUEST_DATA", [
    Field("id", "uint16_t", "Log id (from LOG_ENTRY reply)"),
    Field("ofs", "uint32_t", "Offset into the log"),
    Field("count", "uint8_t", "Number of bytes (zero for end of log)"),
    Field("data", "uint8_t[90]", "log data"),
])

LogErase = common.message(121, "LOG_ERASE", 237,
    "Erase all logs", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
])

LogRequestEnd = common.message(122, "LOG_REQUEST_END", 203,
    "Stop log transfer and resume normal logging", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
])

# GPS corrections and auxiliary sensors

GpsInjectData = common.message(123, "GPS_INJECT_DATA", 250,
    "data for injecting into the onboard GPS (used for DGPS)", [
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("len", "uint8_t", "data length"),
    Field("data", "uint8_t[110]", "raw data (110 is enough for 12 satellites of RTCMv2)"),
])

Gps2Raw = common.message(124, "GPS2_RAW", 87,
    "Second GPS data. Coordinate frame is right-handed, Z-axis up (GPS frame).", [
    Field("time_usec", "uint64_t", "Timestamp (microseconds since UNIX epoch or microseconds since system boot)"),
    Field("fix_type", "uint8_t", "GPS fix type.", enum="GPS_FIX_TYPE"),
    Field("lat", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("lon", "int32_t", "Longitude (WGS84), in degrees * 1E7"),
    Field("alt", "int32_t", "Altitude (AMSL, not WGS84), in meters * 1000 (positive for up)"),
    Field("eph", "uint16_t", "GPS HDOP horizontal dilution of position in cm (m*100). If unknown, set to: UINT16_MAX"),
    Field("epv", "uint16_t", "GPS VDOP vertical dilution of position in cm (m*100). If unknown, set to: UINT16_MAX"),
    Field("vel", "uint16_t", "GPS ground speed (m/s * 100). If unknown, set to: UINT16_MAX"),
    Field("cog", "uint16_t", "Course over ground (NOT heading, but direction of movement): 0.0..359.99 degrees. If unknown, set to: UINT16_MAX"),
    Field("satellites_visible", "uint8_t", "Number of satellites visible. If unknown, set to 255"),
    Field("dgps_numch", "uint8_t", "Number of DGPS satellites"),
    Field("dgps_age", "uint32_t", "Age of DGPS info"),
])

PowerStatus = common.message(125, "POWER_STATUS", 203,
    "Power supply status", [
    Field("Vcc", "uint16_t", "5V rail voltage in millivolts"),
    Field("Vservo", "uint16_t", "servo rail voltage in millivolts"),
    Field("flags", "uint16_t", "power supply status flags (see MAV_POWER_STATUS enum)", enum="MAV_POWER_STATUS"),
])

SerialControl = common.message(126, "SERIAL_CONTROL", 220,
    "Control a serial port. This can be used for raw access to an onboard serial peripheral such as "
    "a GPS or telemetry radio.", [
    Field("device", "uint8_t", "See SERIAL_CONTROL_DEV enum", enum="SERIAL_CONTROL_DEV"),
    Field("flags", "uint8_t", "See SERIAL_CONTROL_FLAG enum", enum="SERIAL_CONTROL_FLAG"),
    Field("timeout", "uint16_t", "Timeout for reply data in milliseconds"),
    Field("baudrate", "uint32_t", "Baudrate of transfer. Zero means no change."),
    Field("count", "uint8_t", "how many bytes in this transfer"),
    Field("data", "uint8_t[70]", "serial data"),
])

GpsRtk = common.message(127, "GPS_RTK", 25,
    "RTK GPS data. Gives information on the relative baseline calculation the GPS is reporting", [
    Field("time_last_baseline_ms", "uint32_t", "Time since boot of last baseline message received in ms."),
    Field("rtk_receiver_id", "uint8_t", "Identification of connected RTK receiver."),
    Field("wn", "uint16_t", "GPS Week Number of last baseline"),
    Field("tow", "uint32_t", "GPS Time of Week of last baseline"),
    Field("rtk_health", "uint8_t", "GPS-specific health report for RTK data."),
    Field("rtk_rate", "uint8_t", "Rate of baseline messages being received by GPS, in HZ"),
    Field("nsats", "uint8_t", "Current number of sats used for RTK calculation."),
    Field("baseline_coords_type", "uint8_t", "Coordinate system of baseline. 0 == ECEF, 1 == NED"),
    Field("baseline_a_mm", "int32_t", "Current baseline in ECEF x or NED north component in mm."),
    Field("baseline_b_mm", "int32_t", "Current baseline in ECEF y or NED east component in mm."),
    Field("baseline_c_mm", "int32_t", "Current baseline in ECEF z or NED down component in mm."),
    Field("accuracy", "uint32_t", "Current estimate of baseline accuracy."),
    Field("iar_num_hypotheses", "int32_t", "Current number of integer ambiguity hypotheses."),
])

Gps2Rtk = common.message(128, "GPS2_RTK", 226,
    "RTK GPS data. Gives information on the relative baseline calculation the GPS is reporting", [
    Field("time_last_baseline_ms", "uint32_t", "Time since boot of last baseline message received in ms."),
    Field("rtk_receiver_id", "uint8_t", "Identification of connected RTK receiver."),
    Field("wn", "uint16_t", "GPS Week Number of last baseline"),
    Field("tow", "uint32_t", "GPS Time of Week of last baseline"),
    Field("rtk_health", "uint8_t", "GPS-specific health report for RTK data."),
    Field("rtk_rate", "uint8_t", "Rate of baseline messages being received by GPS, in HZ"),
    Field("nsats", "uint8_t", "Current number of sats used for RTK calculation."),
    Field("baseline_coords_type", "uint8_t", "Coordinate system of baseline. 0 == ECEF, 1 == NED"),
    Field("baseline_a_mm", "int32_t", "Current baseline in ECEF x or NED north component in mm."),
    Field("baseline_b_mm", "int32_t", "Current baseline in ECEF y or NED east component in mm."),
    Field("baseline_c_mm", "int32_t", "Current baseline in ECEF z or NED down component in mm."),
    Field("accuracy", "uint32_t", "Current estimate of baseline accuracy."),
    Field("iar_num_hypotheses", "int32_t", "Current number of integer ambiguity hypotheses."),
])

ScaledImu3 = common.message(129, "SCALED_IMU3", 46,
    "The RAW IMU readings for 3rd 9DOF sensor setup. This message should contain the scaled values to "
    "the described units", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("xacc", "int16_t", "X acceleration (mg)"),
    Field("yacc", "int16_t", "Y acceleration (mg)"),
    Field("zacc", "int16_t", "Z acceleration (mg)"),
    Field("xgyro", "int16_t", "Angular speed around X axis (millirad /sec)"),
    Field("ygyro", "int16_t", "Angular speed around Y axis (millirad /sec)"),
    Field("zgyro", "int16_t", "Angular speed around Z axis (millirad /sec)"),
    Field("xmag", "int16_t", "X Magnetic field (milli tesla)"),
    Field("ymag", "int16_t", "Y Magnetic field (milli tesla)"),
    Field("zmag", "int16_t", "Z Magnetic field (milli tesla)"),
])

DataTransmissionHandshake = common.message(130, "DATA_TRANSMISSION_HANDSHAKE", 29,
    "Handshake message to initiate, control and stop image streaming.", [
    Field("type", "uint8_t", "type of requested/acknowledged data.", enum="MAVLINK_DATA_STREAM_TYPE"),
    Field("size", "uint32_t", "total data size in bytes (set on ACK only)"),
    Field("width", "uint16_t", "Width of a matrix or image"),
    Field("height", "uint16_t", "Height of a matrix or image"),
    Field("packets", "uint16_t", "number of packets beeing sent (set on ACK only)"),
    Field("payload", "uint8_t", "payload size per packet (normally 253 byte, see DATA field size in message ENCAPSULATED_DATA) (set on ACK only)"),
    Field("jpg_quality", "uint8_t", "JPEG quality out of [1,100]"),
])

EncapsulatedData = common.message(131, "ENCAPSULATED_DATA", 223,
    "Data packet carrying one chunk of a DATA_TRANSMISSION_HANDSHAKE transfer.", [
    Field("seqnr", "uint16_t", "sequence number (starting with 0 on every transmission)"),
    Field("data", "uint8_t[253]", "image data bytes"),
])

DistanceSensor = common.message(132, "DISTANCE_SENSOR", 85,
    "Distance sensor reading.", [
    Field("time_boot_ms", "uint32_t", "Time since system boot"),
    Field("min_distance", "uint16_t", "Minimum distance the sensor can measure in centimeters"),
    Field("max_distance", "uint16_t", "Maximum distance the sensor can measure in centimeters"),
    Field("current_distance", "uint16_t", "Current distance reading"),
    Field("type", "uint8_t", "Type from MAV_DISTANCE_SENSOR enum.", enum="MAV_DISTANCE_SENSOR"),
    Field("id", "uint8_t", "Onboard ID of the sensor"),
    Field("orientation", "uint8_t", "Direction the sensor faces from MAV_SENSOR_ORIENTATION enum.", enum="MAV_SENSOR_ORIENTATION"),
    Field("covariance", "uint8_t", "Measurement covariance in centimeters, 0 for unknown / invalid readings"),
])

# Terrain

TerrainRequest = common.message(133, "TERRAIN_REQUEST", 6,
    "Request for terrain data and terrain status", [
    Field("lat", "int32_t", "Latitude of SW corner of first grid (degrees *10^7)"),
    Field("lon", "int32_t", "Longitude of SW corner of first grid (in degrees *10^7)"),
    Field("grid_spacing", "uint16_t", "Grid spacing in meters"),
    Field("mask", "uint64_t", "Bitmask of requested 4x4 grids (row major 8x7 array of grids, 56 bits)"),
])

TerrainData = common.message(134, "TERRAIN_DATA", 229,
    "Terrain data sent from GCS. The lat/lon and grid_spacing must be the same as a lat/lon from a "
    "TERRAIN_REQUEST", [
    Field("lat", "int32_t", "Latitude of SW corner of first grid (degrees *10^7)"),
    Field("lon", "int32_t", "Longitude of SW corner of first grid (in degrees *10^7)"),
    Field("grid_spacing", "uint16_t", "Grid spacing in meters"),
    Field("gridbit", "uint8_t", "bit within the terrain request mask"),
    Field("data", "int16_t[16]", "Terrain data in meters AMSL"),
])

TerrainCheck = common.message(135, "TERRAIN_CHECK", 203,
    "Request that the vehicle report terrain height at the given location. Used by GCS to check if "
    "vehicle has all terrain data needed for a mission.", [
    Field("lat", "int32_t", "Latitude (degrees *10^7)"),
    Field("lon", "int32_t", "Longitude (degrees *10^7)"),
])

TerrainReport = common.message(136, "TERRAIN_REPORT", 1,
    "Response from a TERRAIN_CHECK request", [
    Field("lat", "int32_t", "Latitude (degrees *10^7)"),
    Field("lon", "int32_t", "Longitude (degrees *10^7)"),
    Field("spacing", "uint16_t", "grid spacing (zero if terrain at this location unavailable)"),
    Field("terrain_height", "float", "Terrain height in meters AMSL"),
    Field("current_height", "float", "Current vehicle height above lat/lon terrain height (meters)"),
    Field("pending", "uint16_t", "Number of 4x4 terrain blocks waiting to be received or read from disk"),
    Field("loaded", "uint16_t", "Number of 4x4 terrain blocks in memory"),
])

ScaledPressure2 = common.message(137, "SCALED_PRESSURE2", 195,
    "Barometer readings for 2nd barometer", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("press_abs", "float", "Absolute pressure (hectopascal)"),
    Field("press_diff", "float", "Differential pressure 1 (hectopascal)"),
    Field("temperature", "int16_t", "Temperature measurement (0.01 degrees celsius)"),
])

AttPosMocap = common.message(138, "ATT_POS_MOCAP", 109,
    "Motion capture attitude and position", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("q", "float[4]", "Attitude quaternion (w, x, y, z order, zero-rotation is 1, 0, 0, 0)"),
    Field("x", "float", "X position in meters (NED)"),
    Field("y", "float", "Y position in meters (NED)"),
    Field("z", "float", "Z position in meters (NED)"),
])

SetActuatorControlTarget = common.message(139, "SET_ACTUATOR_CONTROL_TARGET", 168,
    "Set the vehicle attitude and body angular rates.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("group_mlx", "uint8_t", "Actuator group. The \"_mlx\" indicates this is a multi-instance message and a MAVLink parser should use this field to difference between instances."),
    Field("target_system", "uint8_t", "System ID"),
    Field("target_component", "uint8_t", "Component ID"),
    Field("controls", "float[8]", "Actuator controls. Normed to -1..+1 where 0 is neutral position. Throttle for single rotation direction motors is 0..1, negative range for reverse direction."),
])

ActuatorControlTarget = common.message(140, "ACTUATOR_CONTROL_TARGET", 181,
    "Set the vehicle attitude and body angular rates.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("group_mlx", "uint8_t", "Actuator group. The \"_mlx\" indicates this is a multi-instance message and a MAVLink parser should use this field to difference between instances."),
    Field("controls", "float[8]", "Actuator controls. Normed to -1..+1 where 0 is neutral position. Throttle for single rotation direction motors is 0..1, negative range for reverse direction."),
])

Altitude = common.message(141, "ALTITUDE", 47,
    "The current system altitude.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("altitude_monotonic", "float", "This altitude measure is initialized on system boot and monotonic (it is never reset, but represents the local altitude change)."),
    Field("altitude_amsl", "float", "This altitude measure is strictly above mean sea level and might be non-monotonic (it might reset on events like GPS lock or when a new QNH value is set)."),
    Field("altitude_local", "float", "This is the local altitude in the local coordinate frame. It is not the altitude above home, but in reference to the coordinate origin (0, 0, 0). It is up-positive."),
    Field("altitude_relative", "float", "This is the altitude above the home position. It resets on each change of the current home position."),
    Field("altitude_terrain", "float", "This is the altitude above terrain. It might be fed by a terrain database or an altimeter. Values smaller than -1000 should be interpreted as unknown."),
    Field("bottom_clearance", "float", "This is not the altitude, but the clear space below the system according to the fused clearance estimate."),
])

ResourceRequest = common.message(142, "RESOURCE_REQUEST", 72,
    "The autopilot is requesting a resource (file, binary, other type of data)", [
    Field("request_id", "uint8_t", "Request ID. This ID should be re-used when sending back URI contents"),
    Field("uri_type", "uint8_t", "The type of requested URI. 0 = a file via URL. 1 = a UAVCAN binary"),
    Field("uri", "uint8_t[120]", "The requested unique resource identifier (URI). It is not necessarily a straight domain name (depends on the URI type enum)"),
    Field("transfer_type", "uint8_t", "The way the autopilot wants to receive the URI. 0 = MAVLink FTP. 1 = binary stream."),
    Field("storage", "uint8_t[120]", "The storage path the autopilot wants the URI to be stored in. Will only be valid if the transfer_type has a storage associated (e.g. MAVLink FTP)."),
])

ScaledPressure3 = common.message(143, "SCALED_PRESSURE3", 131,
    "Barometer readings for 3rd barometer", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("press_abs", "float", "Absolute pressure (hectopascal)"),
    Field("press_diff", "float", "Differential pressure 1 (hectopascal)"),
    Field("temperature", "int16_t", "Temperature measurement (0.01 degrees celsius)"),
])

FollowTarget = common.message(144, "FOLLOW_TARGET", 127,
    "current motion information from a designated system", [
    Field("timestamp", "uint64_t", "Timestamp in milliseconds since system boot"),
    Field("est_capabilities", "uint8_t", "bit positions for tracker reporting capabilities (POS = 0, VEL = 1, ACCEL = 2, ATT + RATES = 3)"),
    Field("lat", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("lon", "int32_t", "Longitude (WGS84), in degrees * 1E7"),
    Field("alt", "float", "AMSL, in meters"),
    Field("vel", "float[3]", "target velocity (0,0,0) for unknown"),
    Field("acc", "float[3]", "linear target acceleration (0,0,0) for unknown"),
    Field("attitude_q", "float[4]", "(1 0 0 0 for unknown)"),
    Field("rates", "float[3]", "(0 0 0 for unknown)"),
    Field("position_cov", "float[3]", "eph epv"),
    Field("custom_state", "uint64_t", "button states or switches of a tracker device"),
])

ControlSystemState = common.message(146, "CONTROL_SYSTEM_STATE", 103,
    "The smoothed, monotonic system state used to feed the control loops of the system.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("x_acc", "float", "X acceleration in body frame"),
    Field("y_acc", "float", "Y acceleration in body frame"),
    Field("z_acc", "float", "Z acceleration in body frame"),
    Field("x_vel", "float", "X velocity in body frame"),
    Field("y_vel", "float", "Y velocity in body frame"),
    Field("z_vel", "float", "Z velocity in body frame"),
    Field("x_pos", "float", "X position in local frame"),
    Field("y_pos", "float", "Y position in local frame"),
    Field("z_pos", "float", "Z position in local frame"),
    Field("airspeed", "float", "Airspeed, set to -1 if unknown"),
    Field("vel_variance", "float[3]", "Variance of body velocity estimate"),
    Field("pos_variance", "float[3]", "Variance in local position"),
    Field("q", "float[4]", "The attitude, represented as Quaternion"),
    Field("roll_rate", "float", "Angular rate in roll axis"),
    Field("pitch_rate", "float", "Angular rate in pitch axis"),
    Field("yaw_rate", "float", "Angular rate in yaw axis"),
])

BatteryStatus = common.message(147, "BATTERY_STATUS", 154,
    "Battery information", [
    Field("id", "uint8_t", "Battery ID"),
    Field("battery_function", "uint8_t", "Function of the battery", enum="MAV_BATTERY_FUNCTION"),
    Field("type", "uint8_t", "Type (chemistry) of the battery", enum="MAV_BATTERY_TYPE"),
    Field("temperature", "int16_t", "Temperature of the battery in centi-degrees celsius. INT16_MAX for unknown temperature."),
    Field("voltages", "uint16_t[10]", "Battery voltage of cells, in millivolts (1 = 1 millivolt). Cells above the valid cell count for this battery should have the UINT16_MAX value."),
    Field("current_battery", "int16_t", "Battery current, in 10*milliamperes (1 = 10 milliampere), -1: autopilot does not measure the current"),
    Field("current_consumed", "int32_t", "Consumed charge, in milliampere hours (1 = 1 mAh), -1: autopilot does not provide mAh consumption estimate"),
    Field("energy_consumed", "int32_t", "Consumed energy, in HectoJoules (intergrated U*I*dt)  (1 = 100 Joule), -1: autopilot does not provide energy consumption estimate"),
    Field("battery_remaining", "int8_t", "Remaining battery energy: (0%: 0, 100%: 100), -1: autopilot does not estimate the remaining battery"),
])

AutopilotVersion = common.message(148, "AUTOPILOT_VERSION", 178,
    "Version and capability of autopilot software", [
    Field("capabilities", "uint64_t", "bitmask of capabilities (see MAV_PROTOCOL_CAPABILITY enum)", enum="MAV_PROTOCOL_CAPABILITY"),
    Field("flight_sw_version", "uint32_t", "Firmware version number"),
    Field("middleware_sw_version", "uint32_t", "Middleware version number"),
    Field("os_sw_version", "uint32_t", "Operating system version number"),
    Field("board_version", "uint32_t", "HW / board version (last 8 bytes should be silicon ID, if any)"),
    Field("flight_custom_version", "uint8_t[8]", "Custom version field, commonly the first 8 bytes of the git hash."),
    Field("middleware_custom_version", "uint8_t[8]", "Custom version field, commonly the first 8 bytes of the git hash."),
    Field("os_custom_version", "uint8_t[8]", "Custom version field, commonly the first 8 bytes of the git hash."),
    Field("vendor_id", "uint16_t", "ID of the board vendor"),
    Field("product_id", "uint16_t", "ID of the product"),
    Field("uid", "uint64_t", "UID if provided by hardware"),
])

LandingTarget = common.message(149, "LANDING_TARGET", 200,
    "The location of a landing area captured from a downward facing camera", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("target_num", "uint8_t", "The ID of the target if multiple targets are present"),
    Field("frame", "uint8_t", "MAV_FRAME enum specifying the whether the following feilds are earth-frame, body-frame, etc.", enum="MAV_FRAME"),
    Field("angle_x", "float", "X-axis angular offset (in radians) of the target from the center of the image"),
    Field("angle_y", "float", "Y-axis angular offset (in radians) of the target from the center of the image"),
    Field("distance", "float", "Distance to the target from the vehicle in meters"),
    Field("size_x", "float", "Size in radians of target along x-axis"),
    Field("size_y", "float", "Size in radians of target along y-axis"),
])

# Estimator, GPS input and high latency links

EstimatorStatus = common.message(230, "ESTIMATOR_STATUS", 163,
    "Estimator status message including flags, innovation test ratios and estimated accuracies.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("flags", "uint16_t", "Integer bitmask indicating which EKF outputs are valid.", enum="ESTIMATOR_STATUS_FLAGS"),
    Field("vel_ratio", "float", "Velocity innovation test ratio"),
    Field("pos_horiz_ratio", "float", "Horizontal position innovation test ratio"),
    Field("pos_vert_ratio", "float", "Vertical position innovation test ratio"),
    Field("mag_ratio", "float", "Magnetometer innovation test ratio"),
    Field("hagl_ratio", "float", "Height above terrain innovation test ratio"),
    Field("tas_ratio", "float", "True airspeed innovation test ratio"),
    Field("pos_horiz_accuracy", "float", "Horizontal position 1-STD accuracy relative to the EKF local origin (m)"),
    Field("pos_vert_accuracy", "float", "Vertical position 1-STD accuracy relative to the EKF local origin (m)"),
])

WindCov = common.message(231, "WIND_COV", 105,
    "Wind covariance estimate from vehicle.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("wind_x", "float", "Wind in X (NED) direction in m/s"),
    Field("wind_y", "float", "Wind in Y (NED) direction in m/s"),
    Field("wind_z", "float", "Wind in Z (NED) direction in m/s"),
    Field("var_horiz", "float", "Variability of the wind in XY. RMS of a 1 Hz lowpassed wind estimate."),
    Field("var_vert", "float", "Variability of the wind in Z. RMS of a 1 Hz lowpassed wind estimate."),
    Field("wind_alt", "float", "AMSL altitude (m) this measurement was taken at"),
    Field("horiz_accuracy", "float", "Horizontal speed 1-STD accuracy"),
    Field("vert_accuracy", "float", "Vertical speed 1-STD accuracy"),
])

GpsInput = common.message(232, "GPS_INPUT", 151,
    "GPS sensor input message. This is a raw sensor value sent by the GPS. This is NOT the global "
    "position estimate of the sytem.", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("gps_id", "uint8_t", "ID of the GPS for multiple GPS inputs"),
    Field("ignore_flags", "uint16_t", "Flags indicating which fields to ignore (see GPS_INPUT_IGNORE_FLAGS enum). All other fields must be provided.", enum="GPS_INPUT_IGNORE_FLAGS"),
    Field("time_week_ms", "uint32_t", "GPS time (milliseconds from start of GPS week)"),
    Field("time_week", "uint16_t", "GPS week number"),
    Field("fix_type", "uint8_t", "0-1: no fix, 2: 2D fix, 3: 3D fix. 4: 3D with DGPS. 5: 3D with RTK"),
    Field("lat", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("lon", "int32_t", "Longitude (WGS84), in degrees * 1E7"),
    Field("alt", "float", "Altitude (AMSL, not WGS84), in m (positive for up)"),
    Field("hdop", "float", "GPS HDOP horizontal dilution of position in m"),
    Field("vdop", "float", "GPS VDOP vertical dilution of position in m"),
    Field("vn", "float", "GPS velocity in m/s in NORTH direction in earth-fixed NED frame"),
    Field("ve", "float", "GPS velocity in m/s in EAST direction in earth-fixed NED frame"),
    Field("vd", "float", "GPS velocity in m/s in DOWN direction in earth-fixed NED frame"),
    Field("speed_accuracy", "float", "GPS speed accuracy in m/s"),
    Field("horiz_accuracy", "float", "GPS horizontal accuracy in m"),
    Field("vert_accuracy", "float", "GPS vertical accuracy in m"),
    Field("satellites_visible", "uint8_t", "Number of satellites visible."),
])

GpsRtcmData = common.message(233, "GPS_RTCM_DATA", 35,
    "RTCM message for injecting into the onboard GPS (used for DGPS)", [
    Field("flags", "uint8_t", "LSB: 1 means message is fragmented, next 2 bits are the fragment ID, the remaining 5 bits are used for the sequence ID."),
    Field("len", "uint8_t", "data length"),
    Field("data", "uint8_t[180]", "RTCM message (may be fragmented)"),
])

HighLatency = common.message(234, "HIGH_LATENCY", 150,
    "Message appropriate for high latency connections like Iridium", [
    Field("base_mode", "uint8_t", "System mode bitfield, see MAV_MODE_FLAG ENUM in mavlink/include/mavlink_types.h", enum="MAV_MODE_FLAG"),
    Field("custom_mode", "uint32_t", "A bitfield for use for autopilot-specific flags."),
    Field("landed_state", "uint8_t", "The landed state. Is set to MAV_LANDED_STATE_UNDEFINED if landed state is unknown.", enum="MAV_LANDED_STATE"),
    Field("roll", "int16_t", "roll (centidegrees)"),
    Field("pitch", "int16_t", "pitch (centidegrees)"),
    Field("heading", "uint16_t", "heading (centidegrees)"),
    Field("throttle", "int8_t", "throttle (percentage)"),
    Field("heading_sp", "int16_t", "heading setpoint (centidegrees)"),
    Field("latitude", "int32_t", "Latitude, expressed as degrees * 1E7"),
    Field("longitude", "int32_t", "Longitude, expressed as degrees * 1E7"),
    Field("altitude_amsl", "int16_t", "Altitude above mean sea level (meters)"),
    Field("altitude_sp", "int16_t", "Altitude setpoint relative to the home position (meters)"),
    Field("airspeed", "uint8_t", "airspeed (m/s)"),
    Field("airspeed_sp", "uint8_t", "airspeed setpoint (m/s)"),
    Field("groundspeed", "uint8_t", "groundspeed (m/s)"),
    Field("climb_rate", "int8_t", "climb rate (m/s)"),
    Field("gps_nsat", "uint8_t", "Number of satellites visible. If unknown, set to 255"),
    Field("gps_fix_type", "uint8_t", "See the GPS_FIX_TYPE enum.", enum="GPS_FIX_TYPE"),
    Field("battery_remaining", "uint8_t", "Remaining battery (percentage)"),
    Field("temperature", "int8_t", "Autopilot temperature (degrees C)"),
    Field("temperature_air", "int8_t", "Air temperature (degrees C) from airspeed sensor"),
    Field("failsafe", "uint8_t", "failsafe (each bit represents a failsafe where 0=ok, 1=failsafe active (bit0:RC, bit1:batt, bit2:GPS, bit3:GCS, bit4:fence)"),
    Field("wp_num", "uint8_t", "current waypoint number"),
    Field("wp_distance", "uint16_t", "distance to target (meters)"),
])

# Vehicle reports

Vibration = common.message(241, "VIBRATION", 90,
    "Vibration levels and accelerometer clipping", [
    Field("time_usec", "uint64_t", "Timestamp (micros since boot or Unix epoch)"),
    Field("vibration_x", "float", "Vibration levels on X-axis"),
    Field("vibration_y", "float", "Vibration levels on Y-axis"),
    Field("vibration_z", "float", "Vibration levels on Z-axis"),
    Field("clipping_0", "uint32_t", "first accelerometer clipping count"),
    Field("clipping_1", "uint32_t", "second accelerometer clipping count"),
    Field("clipping_2", "uint32_t", "third accelerometer clipping count"),
])

HomePosition = common.message(242, "HOME_POSITION", 104,
    "This message can be requested by sending the MAV_CMD_GET_HOME_POSITION command. The position the "
    "system will return to and land on.", [
    Field("latitude", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("longitude", "int32_t", "Longitude (WGS84, in degrees * 1E7"),
    Field("altitude", "int32_t", "Altitude (AMSL), in meters * 1000 (positive for up)"),
    Field("x", "float", "Local X position of this position in the local coordinate frame"),
    Field("y", "float", "Local Y position of this position in the local coordinate frame"),
    Field("z", "float", "Local Z position of this position in the local coordinate frame"),
    Field("q", "float[4]", "World to surface normal and heading transformation of the takeoff position. Used to indicate the heading and slope of the ground"),
    Field("approach_x", "float", "Local X position of the end of the approach vector."),
    Field("approach_y", "float", "Local Y position of the end of the approach vector."),
    Field("approach_z", "float", "Local Z position of the end of the approach vector."),
])

SetHomePosition = common.message(243, "SET_HOME_POSITION", 85,
    "The position the system will return to and land on. The position is set automatically by the "
    "system during the takeoff in case it was not explicitely set by the operator before or after.", [
    Field("target_system", "uint8_t", "System ID."),
    Field("latitude", "int32_t", "Latitude (WGS84), in degrees * 1E7"),
    Field("longitude", "int32_t", "Longitude (WGS84, in degrees * 1E7"),
    Field("altitude", "int32_t", "Altitude (AMSL), in meters * 1000 (positive for up)"),
    Field("x", "float", "Local X position of this position in the local coordinate frame"),
    Field("y", "float", "Local Y position of this position in the local coordinate frame"),
    Field("z", "float", "Local Z position of this position in the local coordinate frame"),
    Field("q", "float[4]", "World to surface normal and heading transformation of the takeoff position. Used to indicate the heading and slope of the ground"),
    Field("approach_x", "float", "Local X position of the end of the approach vector."),
    Field("approach_y", "float", "Local Y position of the end of the approach vector."),
    Field("approach_z", "float", "Local Z position of the end of the approach vector."),
])

MessageInterval = common.message(244, "MESSAGE_INTERVAL", 95,
    "This interface replaces DATA_STREAM", [
    Field("message_id", "uint16_t", "The ID of the requested MAVLink message. v1.0 is limited to 254 messages."),
    Field("interval_us", "int32_t", "The interval between two messages, in microseconds. A value of -1 indicates this stream is disabled, 0 indicates it is not available, > 0 indicates the interval at which it is sent."),
])

ExtendedSysState = common.message(245, "EXTENDED_SYS_STATE", 130,
    "Provides state for additional features", [
    Field("vtol_state", "uint8_t", "The VTOL state if applicable. Is set to MAV_VTOL_STATE_UNDEFINED if UAV is not in VTOL configuration.", enum="MAV_VTOL_STATE"),
    Field("landed_state", "uint8_t", "The landed state. Is set to MAV_LANDED_STATE_UNDEFINED if landed state is unknown.", enum="MAV_LANDED_STATE"),
])

AdsbVehicle = common.message(246, "ADSB_VEHICLE", 184,
    "The location and information of an ADSB vehicle", [
    Field("ICAO_address", "uint32_t", "ICAO address"),
    Field("lat", "int32_t", "Latitude, expressed as degrees * 1E7"),
    Field("lon", "int32_t", "Longitude, expressed as degrees * 1E7"),
    Field("altitude_type", "uint8_t", "Type from ADSB_ALTITUDE_TYPE enum", enum="ADSB_ALTITUDE_TYPE"),
    Field("altitude", "int32_t", "Altitude(ASL) in millimeters"),
    Field("heading", "uint16_t", "Course over ground in centidegrees"),
    Field("hor_velocity", "uint16_t", "The horizontal velocity in centimeters/second"),
    Field("ver_velocity", "int16_t", "The vertical velocity in centimeters/second, positive is up"),
    Field("callsign", "char[9]", "The callsign, 8+null"),
    Field("emitter_type", "uint8_t", "Type from ADSB_EMITTER_TYPE enum", enum="ADSB_EMITTER_TYPE"),
    Field("tslc", "uint8_t", "Time since last communication in seconds"),
    Field("flags", "uint16_t", "Flags to indicate various statuses including valid data fields", enum="ADSB_FLAGS"),
    Field("squawk", "uint16_t", "Squawk code"),
])

Collision = common.message(247, "COLLISION", 81,
    "Information about a potential collision", [
    Field("src", "uint8_t", "Collision data source", enum="MAV_COLLISION_SRC"),
    Field("id", "uint32_t", "Unique identifier, domain based on src field"),
    Field("action", "uint8_t", "Action that is being taken to avoid this collision", enum="MAV_COLLISION_ACTION"),
    Field("threat_level", "uint8_t", "How concerned the aircraft is about this collision", enum="MAV_COLLISION_THREAT_LEVEL"),
    Field("time_to_minimum_delta", "float", "Estimated time until collision occurs (seconds)"),
    Field("altitude_minimum_delta", "float", "Closest vertical distance in meters between vehicle and object"),
    Field("horizontal_minimum_delta", "float", "Closest horizontal distance in meteres between vehicle and object"),
])

# Debugging and extension

V2Extension = common.message(248, "V2_EXTENSION", 8,
    "Message implementing parts of the V2 payload specs in V1 frames for transitional support.", [
    Field("target_network", "uint8_t", "Network ID (0 for broadcast)"),
    Field("target_system", "uint8_t", "System ID (0 for broadcast)"),
    Field("target_component", "uint8_t", "Component ID (0 for broadcast)"),
    Field("message_type", "uint16_t", "A code that identifies the software component that understands this message (analogous to usb device classes or mime type strings)."),
    Field("payload", "uint8_t[249]", "Variable length payload. The length is defined by the remaining message length when subtracting the header and other fields."),
])

MemoryVect = common.message(249, "MEMORY_VECT", 204,
    "Send raw controller memory. The use of this message is discouraged for normal packets, but a "
    "quite efficient way for testing new messages and getting experimental debug output.", [
    Field("address", "uint16_t", "Starting address of the debug variables"),
    Field("ver", "uint8_t", "Version code of the type variable. 0=unknown, type ignored and assumed int16_t. 1=as below"),
    Field("type", "uint8_t", "Type code of the memory variables. for ver = 1: 0=16 x int16_t, 1=16 x uint16_t, 2=16 x Q15, 3=16 x 1Q14"),
    Field("value", "int8_t[32]", "Memory contents at specified address"),
])

DebugVect = common.message(250, "DEBUG_VECT", 49,
    "Debug vector with a name", [
    Field("name", "char[10]", "Name"),
    Field("time_usec", "uint64_t", "Timestamp"),
    Field("x", "float", "x"),
    Field("y", "float", "y"),
    Field("z", "float", "z"),
])

NamedValueFloat = common.message(251, "NAMED_VALUE_FLOAT", 170,
    "Send a key-value pair as float. The use of this message is discouraged for normal packets, but "
    "a quite efficient way for testing new messages and getting experimental debug output.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("name", "char[10]", "Name of the debug variable"),
    Field("value", "float", "Floating point value"),
])

NamedValueInt = common.message(252, "NAMED_VALUE_INT", 44,
    "Send a key-value pair as integer. The use of this message is discouraged for normal packets, "
    "but a quite efficient way for testing new messages and getting experimental debug output.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("name", "char[10]", "Name of the debug variable"),
    Field("value", "int32_t", "Signed integer value"),
])

Statustext = common.message(253, "STATUSTEXT", 83,
    "Status text message. These messages are printed in yellow in the COMM console of "
    "QGroundControl. WARNING: They consume quite some bandwidth, so use only for important status "
    "and error messages.", [
    Field("severity", "uint8_t", "Severity of status. Relies on the definitions within RFC-5424.", enum="MAV_SEVERITY"),
    Field("text", "char[50]", "Status text message, without null termination character"),
])

Debug = common.message(254, "DEBUG", 46,
    "Send a debug value. The index is used to discriminate between values. These values show up in "
    "the plot of QGroundControl as DEBUG N.", [
    Field("time_boot_ms", "uint32_t", "Timestamp (milliseconds since system boot)"),
    Field("ind", "uint8_t", "index of debug variable"),
    Field("value", "float", "DEBUG value"),
])
