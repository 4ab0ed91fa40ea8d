"""Enums of the MAVLink ``common`` dialect."""

from ...protocol.dialect import Dialect

common = Dialect("common")

# Vehicle identity and state

MavAutopilot = common.enum(
    "MAV_AUTOPILOT",
    "Micro air vehicle / autopilot classes. This identifies the individual model.",
    [
        ("MAV_AUTOPILOT_GENERIC", 0, "Generic autopilot, full support for everything"),
        ("MAV_AUTOPILOT_RESERVED", 1, "Reserved for future use."),
        ("MAV_AUTOPILOT_SLUGS", 2, "SLUGS autopilot, http://slugsuav.soe.ucsc.edu"),
        ("MAV_AUTOPILOT_ARDUPILOTMEGA", 3, "ArduPilot - Plane/Copter/Rover/Sub/Tracker, https://ardupilot.org"),
        ("MAV_AUTOPILOT_OPENPILOT", 4, "OpenPilot, http://openpilot.org"),
        ("MAV_AUTOPILOT_GENERIC_WAYPOINTS_ONLY", 5, "Generic autopilot only supporting simple waypoints"),
        ("MAV_AUTOPILOT_GENERIC_WAYPOINTS_AND_SIMPLE_NAVIGATION_ONLY", 6, "Generic autopilot supporting waypoints and other simple navigation commands"),
        ("MAV_AUTOPILOT_GENERIC_MISSION_FULL", 7, "Generic autopilot supporting the full mission command set"),
        ("MAV_AUTOPILOT_INVALID", 8, "No valid autopilot, e.g. a GCS or other MAVLink component"),
        ("MAV_AUTOPILOT_PPZ", 9, "PPZ UAV - http://nongnu.org/paparazzi"),
        ("MAV_AUTOPILOT_UDB", 10, "UAV Dev Board"),
        ("MAV_AUTOPILOT_FP", 11, "FlexiPilot"),
        ("MAV_AUTOPILOT_PX4", 12, "PX4 Autopilot - http://px4.io/"),
        ("MAV_AUTOPILOT_SMACCMPILOT", 13, "SMACCMPilot - http://smaccmpilot.org"),
        ("MAV_AUTOPILOT_AUTOQUAD", 14, "AutoQuad -- http://autoquad.org"),
        ("MAV_AUTOPILOT_ARMAZILA", 15, "Armazila -- http://armazila.com"),
        ("MAV_AUTOPILOT_AEROB", 16, "Aerob -- http://aerob.ru"),
        ("MAV_AUTOPILOT_ASLUAV", 17, "ASLUAV autopilot -- http://www.asl.ethz.ch"),
        ("MAV_AUTOPILOT_SMARTAP", 18, "SmartAP Autopilot - http://sky-drones.com"),
        ("MAV_AUTOPILOT_AIRRAILS", 19, "AirRails - http://uaventure.com"),
    ],
)

MavType = common.enum(
    "MAV_TYPE",
    "MAVLINK component type reported in HEARTBEAT message.",
    [
        ("MAV_TYPE_GENERIC", 0, "Generic micro air vehicle"),
        ("MAV_TYPE_FIXED_WING", 1, "Fixed wing aircraft."),
        ("MAV_TYPE_QUADROTOR", 2, "Quadrotor"),
        ("MAV_TYPE_COAXIAL", 3, "Coaxial helicopter"),
        ("MAV_TYPE_HELICOPTER", 4, "Normal helicopter with tail rotor."),
        ("MAV_TYPE_ANTENNA_TRACKER", 5, "Ground installation"),
        ("MAV_TYPE_GCS", 6, "Operator control unit / ground control station"),
        ("MAV_TYPE_AIRSHIP", 7, "Airship, controlled"),
        ("MAV_TYPE_FREE_BALLOON", 8, "Free balloon, uncontrolled"),
        ("MAV_TYPE_ROCKET", 9, "Rocket"),
        ("MAV_TYPE_GROUND_ROVER", 10, "Ground rover"),
        ("MAV_TYPE_SURFACE_BOAT", 11, "Surface vessel, boat, ship"),
        ("MAV_TYPE_SUBMARINE", 12, "Submarine"),
        ("MAV_TYPE_HEXAROTOR", 13, "Hexarotor"),
        ("MAV_TYPE_OCTOROTOR", 14, "Octorotor"),
        ("MAV_TYPE_TRICOPTER", 15, "Tricopter"),
        ("MAV_TYPE_FLAPPING_WING", 16, "Flapping wing"),
        ("MAV_TYPE_KITE", 17, "Kite"),
        ("MAV_TYPE_ONBOARD_CONTROLLER", 18, "Onboard companion controller"),
        ("MAV_TYPE_VTOL_TAILSITTER_DUOROTOR", 19, "Two-rotor Tailsitter VTOL that additionally uses control surfaces in vertical operation."),
        ("MAV_TYPE_VTOL_TAILSITTER_QUADROTOR", 20, "Quad-rotor Tailsitter VTOL using a V-shaped quad config in vertical operation."),
        ("MAV_TYPE_VTOL_TILTROTOR", 21, "Tiltrotor VTOL. Fuselage and wings stay (nominally) horizontal in all flight phases."),
        ("MAV_TYPE_VTOL_FIXEDROTOR", 22, "VTOL with separate fixed rotors for hover and cruise flight."),
        ("MAV_TYPE_VTOL_TAILSITTER", 23, "Tailsitter VTOL. Fuselage and wings orientation changes depending on flight phase."),
        ("MAV_TYPE_VTOL_TILTWING", 24, "Tiltwing VTOL. Fuselage stays horizontal in all flight phases."),
        ("MAV_TYPE_VTOL_RESERVED5", 25, "VTOL reserved 5"),
        ("MAV_TYPE_GIMBAL", 26, "Gimbal"),
        ("MAV_TYPE_ADSB", 27, "ADSB system"),
        ("MAV_TYPE_PARAFOIL", 28, "Steerable, nonrigid airfoil"),
        ("MAV_TYPE_DODECAROTOR", 29, "Dodecarotor"),
        ("MAV_TYPE_CAMERA", 30, "Camera"),
        ("MAV_TYPE_CHARGING_STATION", 31, "Charging station"),
        ("MAV_TYPE_FLARM", 32, "FLARM collision avoidance system"),
        ("MAV_TYPE_SERVO", 33, "Servo"),
    ],
)

MavModeFlag = common.enum(
    "MAV_MODE_FLAG",
    "These flags encode the MAV mode.",
    [
        ("MAV_MODE_FLAG_SAFETY_ARMED", 128, "MAV safety set to armed. Motors are enabled / running / can start. Ready to fly."),
        ("MAV_MODE_FLAG_MANUAL_INPUT_ENABLED", 64, "Remote control input is enabled."),
        ("MAV_MODE_FLAG_HIL_ENABLED", 32, "MAV has hardware in the loop simulation enabled. Motors are blocked."),
        ("MAV_MODE_FLAG_STABILIZE_ENABLED", 16, "MAV has electronic attitude stabilization enabled."),
        ("MAV_MODE_FLAG_GUIDED_ENABLED", 8, "Guided mode enabled, the system flies waypoints / mission items."),
        ("MAV_MODE_FLAG_AUTO_ENABLED", 4, "Autonomous mode enabled, the system finds its own goal positions."),
        ("MAV_MODE_FLAG_TEST_ENABLED", 2, "System has a test mode enabled. Only for temporary system tests."),
        ("MAV_MODE_FLAG_CUSTOM_MODE_ENABLED", 1, "Reserved for future use."),
    ],
    bitmask=True,
)

MavModeFlagDecodePosition = common.enum(
    "MAV_MODE_FLAG_DECODE_POSITION",
    "These values encode the bit positions of the decode position. Used to decode MAV_MODE_FLAG bits.",
    [
        ("MAV_MODE_FLAG_DECODE_POSITION_SAFETY", 128, "First bit:  10000000"),
        ("MAV_MODE_FLAG_DECODE_POSITION_MANUAL", 64, "Second bit: 01000000"),
        ("MAV_MODE_FLAG_DECODE_POSITION_HIL", 32, "Third bit:  00100000"),
        ("MAV_MODE_FLAG_DECODE_POSITION_STABILIZE", 16, "Fourth bit: 00010000"),
        ("MAV_MODE_FLAG_DECODE_POSITION_GUIDED", 8, "Fifth bit:  00001000"),
        ("MAV_MODE_FLAG_DECODE_POSITION_AUTO", 4, "Sixth bit:   00000100"),
        ("MAV_MODE_FLAG_DECODE_POSITION_TEST", 2, "Seventh bit: 00000010"),
        ("MAV_MODE_FLAG_DECODE_POSITION_CUSTOM_MODE", 1, "Eighth bit: 00000001"),
    ],
)

MavGoto = common.enum(
    "MAV_GOTO",
    "Actions that may be specified in MAV_CMD_OVERRIDE_GOTO to override mission execution.",
    [
        ("MAV_GOTO_DO_HOLD", 0, "Hold at the current position."),
        ("MAV_GOTO_DO_CONTINUE", 1, "Continue with the next item in mission execution."),
        ("MAV_GOTO_HOLD_AT_CURRENT_POSITION", 2, "Hold at the current position of the system"),
        ("MAV_GOTO_HOLD_AT_SPECIFIED_POSITION", 3, "Hold at the position specified in the parameters of the DO_HOLD action"),
    ],
)

MavMode = common.enum(
    "MAV_MODE",
    "Predefined OR-combined MAV_MODE_FLAG values. Shorthand for common mode combinations.",
    [
        ("MAV_MODE_PREFLIGHT", 0, "System is not ready to fly, booting, calibrating, etc. No flag is set."),
        ("MAV_MODE_STABILIZE_DISARMED", 80, "System is allowed to be active, under assisted RC control."),
        ("MAV_MODE_STABILIZE_ARMED", 208, "System is allowed to be active, under assisted RC control."),
        ("MAV_MODE_MANUAL_DISARMED", 64, "System is allowed to be active, under manual (RC) control, no stabilization"),
        ("MAV_MODE_MANUAL_ARMED", 192, "System is allowed to be active, under manual (RC) control, no stabilization"),
        ("MAV_MODE_GUIDED_DISARMED", 88, "System is allowed to be active, under autonomous control, manual setpoint"),
        ("MAV_MODE_GUIDED_ARMED", 216, "System is allowed to be active, under autonomous control, manual setpoint"),
        ("MAV_MODE_AUTO_DISARMED", 92, "System is allowed to be active, under autonomous control and navigation."),
        ("MAV_MODE_AUTO_ARMED", 220, "System is allowed to be active, under autonomous control and navigation."),
        ("MAV_MODE_TEST_DISARMED", 66, "UNDEFINED mode. This solely depends on the autopilot - use with caution, intended for developers only."),
        ("MAV_MODE_TEST_ARMED", 194, "UNDEFINED mode. This solely depends on the autopilot - use with caution, intended for developers only."),
    ],
)

MavState = common.enum(
    "MAV_STATE",
    "System status of the MAV, reported in HEARTBEAT.",
    [
        ("MAV_STATE_UNINIT", 0, "Uninitialized system, state is unknown."),
        ("MAV_STATE_BOOT", 1, "System is booting up."),
        ("MAV_STATE_CALIBRATING", 2, "System is calibrating and not flight-ready."),
        ("MAV_STATE_STANDBY", 3, "System is grounded and on standby. It can be launched any time."),
        ("MAV_STATE_ACTIVE", 4, "System is active and might be already airborne. Motors are engaged."),
        ("MAV_STATE_CRITICAL", 5, "System is in a non-normal flight mode. It can however still navigate."),
        ("MAV_STATE_EMERGENCY", 6, "System is in a non-normal flight mode. It lost control over parts or over the whole airframe. It is in mayday and going down."),
        ("MAV_STATE_POWEROFF", 7, "System just initialized its power-down sequence, will shut down now."),
        ("MAV_STATE_FLIGHT_TERMINATION", 8, "System is terminating itself."),
    ],
)

MavSysStatusSensor = common.enum(
    "MAV_SYS_STATUS_SENSOR",
    "These encode the sensors whose status is sent as part of the SYS_STATUS message.",
    [
        ("MAV_SYS_STATUS_SENSOR_3D_GYRO", 1, "0x01 3D gyro"),
        ("MAV_SYS_STATUS_SENSOR_3D_ACCEL", 2, "0x02 3D accelerometer"),
        ("MAV_SYS_STATUS_SENSOR_3D_MAG", 4, "0x04 3D magnetometer"),
        ("MAV_SYS_STATUS_SENSOR_ABSOLUTE_PRESSURE", 8, "0x08 absolute pressure"),
        ("MAV_SYS_STATUS_SENSOR_DIFFERENTIAL_PRESSURE", 16, "0x10 differential pressure"),
        ("MAV_SYS_STATUS_SENSOR_GPS", 32, "0x20 GPS"),
        ("MAV_SYS_STATUS_SENSOR_OPTICAL_FLOW", 64, "0x40 optical flow"),
        ("MAV_SYS_STATUS_SENSOR_VISION_POSITION", 128, "0x80 computer vision position"),
        ("MAV_SYS_STATUS_SENSOR_LASER_POSITION", 256, "0x100 laser based position"),
        ("MAV_SYS_STATUS_SENSOR_EXTERNAL_GROUND_TRUTH", 512, "0x200 external ground truth (Vicon or Leica)"),
        ("MAV_SYS_STATUS_SENSOR_ANGULAR_RATE_CONTROL", 1024, "0x400 3D angular rate control"),
        ("MAV_SYS_STATUS_SENSOR_ATTITUDE_STABILIZATION", 2048, "0x800 attitude stabilization"),
        ("MAV_SYS_STATUS_SENSOR_YAW_POSITION", 4096, "0x1000 yaw position"),
        ("MAV_SYS_STATUS_SENSOR_Z_ALTITUDE_CONTROL", 8192, "0x2000 z/altitude control"),
        ("MAV_SYS_STATUS_SENSOR_XY_POSITION_CONTROL", 16384, "0x4000 x/y position control"),
        ("MAV_SYS_STATUS_SENSOR_MOTOR_OUTPUTS", 32768, "0x8000 motor outputs / control"),
        ("MAV_SYS_STATUS_SENSOR_RC_RECEIVER", 65536, "0x10000 rc receiver"),
        ("MAV_SYS_STATUS_SENSOR_3D_GYRO2", 131072, "0x20000 2nd 3D gyro"),
        ("MAV_SYS_STATUS_SENSOR_3D_ACCEL2", 262144, "0x40000 2nd 3D accelerometer"),
        ("MAV_SYS_STATUS_SENSOR_3D_MAG2", 524288, "0x80000 2nd 3D magnetometer"),
        ("MAV_SYS_STATUS_GEOFENCE", 1048576, "0x100000 geofence"),
        ("MAV_SYS_STATUS_AHRS", 2097152, "0x200000 AHRS subsystem health"),
        ("MAV_SYS_STATUS_TERRAIN", 4194304, "0x400000 Terrain subsystem health"),
        ("MAV_SYS_STATUS_REVERSE_MOTOR", 8388608, "0x800000 Motors are reversed"),
        ("MAV_SYS_STATUS_LOGGING", 16777216, "0x1000000 Logging"),
        ("MAV_SYS_STATUS_SENSOR_BATTERY", 33554432, "0x2000000 Battery"),
        ("MAV_SYS_STATUS_SENSOR_PROXIMITY", 67108864, "0x4000000 Proximity"),
        ("MAV_SYS_STATUS_SENSOR_SATCOM", 134217728, "0x8000000 Satellite Communication"),
    ],
    bitmask=True,
)

# Coordinate frames and data streams

MavFrame = common.enum(
    "MAV_FRAME",
    "Coordinate frames used by MAVLink.",
    [
        ("MAV_FRAME_GLOBAL", 0, "Global (WGS84) coordinate frame + MSL altitude. First value / x: latitude, second value / y: longitude, third value / z: positive altitude over mean sea level (MSL)."),
        ("MAV_FRAME_LOCAL_NED", 1, "Local coordinate frame, Z-down (x: North, y: East, z: Down)."),
        ("MAV_FRAME_MISSION", 2, "NOT a coordinate frame, indicates a mission command."),
        ("MAV_FRAME_GLOBAL_RELATIVE_ALT", 3, "Global (WGS84) coordinate frame + altitude relative to the home position."),
        ("MAV_FRAME_LOCAL_ENU", 4, "Local coordinate frame, Z-up (x: East, y: North, z: Up)."),
        ("MAV_FRAME_GLOBAL_INT", 5, "Global (WGS84) coordinate frame (scaled) + MSL altitude. Latitude and longitude in degrees * 1E7."),
        ("MAV_FRAME_GLOBAL_RELATIVE_ALT_INT", 6, "Global (WGS84) coordinate frame (scaled) + altitude relative to the home position."),
        ("MAV_FRAME_LOCAL_OFFSET_NED", 7, "Offset to the current local frame. Anything expressed in this frame should be added to the current local frame position."),
        ("MAV_FRAME_BODY_NED", 8, "Setpoint in body NED frame. This makes sense if all position control is externalized."),
        ("MAV_FRAME_BODY_OFFSET_NED", 9, "Offset in body NED frame. This makes sense if adding setpoints to the current flight path."),
        ("MAV_FRAME_GLOBAL_TERRAIN_ALT", 10, "Global (WGS84) coordinate frame with AGL altitude (at the waypoint coordinate)."),
        ("MAV_FRAME_GLOBAL_TERRAIN_ALT_INT", 11, "Global (WGS84) coordinate frame (scaled) with AGL altitude (at the waypoint coordinate)."),
        ("MAV_FRAME_BODY_FRD", 12, "Body fixed frame of reference, Z-down (x: Forward, y: Right, z: Down)."),
        ("MAV_FRAME_LOCAL_FRD", 20, "Forward, Right, Down coordinate frame. Local frame with an arbitrary heading."),
        ("MAV_FRAME_LOCAL_FLU", 21, "Forward, Left, Up coordinate frame. Local frame with an arbitrary heading."),
    ],
)

MavlinkDataStreamType = common.enum(
    "MAVLINK_DATA_STREAM_TYPE",
    "Type of data carried by a DATA_TRANSMISSION_HANDSHAKE / ENCAPSULATED_DATA transfer.",
    [
        ("MAVLINK_DATA_STREAM_IMG_JPEG", 0, "JPEG image"),
        ("MAVLINK_DATA_STREAM_IMG_BMP", 1, "BMP image"),
        ("MAVLINK_DATA_STREAM_IMG_RAW8U", 2, "Raw 8 bit image"),
        ("MAVLINK_DATA_STREAM_IMG_RAW32U", 3, "Raw 32 bit image"),
        ("MAVLINK_DATA_STREAM_IMG_PGM", 4, "PGM image"),
        ("MAVLINK_DATA_STREAM_IMG_PNG", 5, "PNG image"),
    ],
)

MavDataStream = common.enum(
    "MAV_DATA_STREAM",
    "A data stream is not a fixed set of messages, but rather a recommendation to the autopilot software. "
    "Individual autopilots may or may not obey the recommended messages.",
    [
        ("MAV_DATA_STREAM_ALL", 0, "Enable all data streams"),
        ("MAV_DATA_STREAM_RAW_SENSORS", 1, "Enable IMU_RAW, GPS_RAW, GPS_STATUS packets."),
        ("MAV_DATA_STREAM_EXTENDED_STATUS", 2, "Enable GPS_STATUS, CONTROL_STATUS, AUX_STATUS"),
        ("MAV_DATA_STREAM_RC_CHANNELS", 3, "Enable RC_CHANNELS_SCALED, RC_CHANNELS_RAW, SERVO_OUTPUT_RAW"),
        ("MAV_DATA_STREAM_RAW_CONTROLLER", 4, "Enable ATTITUDE_CONTROLLER_OUTPUT, POSITION_CONTROLLER_OUTPUT, NAV_CONTROLLER_OUTPUT."),
        ("MAV_DATA_STREAM_POSITION", 6, "Enable LOCAL_POSITION, GLOBAL_POSITION/GLOBAL_POSITION_INT messages."),
        ("MAV_DATA_STREAM_EXTRA1", 10, "Dependent on the autopilot"),
        ("MAV_DATA_STREAM_EXTRA2", 11, "Dependent on the autopilot"),
        ("MAV_DATA_STREAM_EXTRA3", 12, "Dependent on the autopilot"),
    ],
)

MavRoi = common.enum(
    "MAV_ROI",
    "The ROI (region of interest) for the vehicle. This can be used by the vehicle for camera/vehicle attitude alignment.",
    [
        ("MAV_ROI_NONE", 0, "No region of interest."),
        ("MAV_ROI_WPNEXT", 1, "Point toward next waypoint, with optional pitch/roll/yaw offset."),
        ("MAV_ROI_WPINDEX", 2, "Point toward given waypoint."),
        ("MAV_ROI_LOCATION", 3, "Point toward fixed location."),
        ("MAV_ROI_TARGET", 4, "Point toward of given id."),
    ],
)

# Fences and mounts

FenceAction = common.enum(
    "FENCE_ACTION",
    "Actions following geofence breach.",
    [
        ("FENCE_ACTION_NONE", 0, "Disable fenced mode"),
        ("FENCE_ACTION_GUIDED", 1, "Switched to guided mode to return point (fence point 0)"),
        ("FENCE_ACTION_REPORT", 2, "Report fence breach, but don't take action"),
        ("FENCE_ACTION_GUIDED_THR_PASS", 3, "Switched to guided mode to return point (fence point 0) with manual throttle control"),
        ("FENCE_ACTION_RTL", 4, "Switch to RTL (return to launch) mode and head for the return point."),
    ],
)

FenceBreach = common.enum(
    "FENCE_BREACH",
    "Type of the last geofence breach.",
    [
        ("FENCE_BREACH_NONE", 0, "No last fence breach"),
        ("FENCE_BREACH_MINALT", 1, "Breached minimum altitude"),
        ("FENCE_BREACH_MAXALT", 2, "Breached maximum altitude"),
        ("FENCE_BREACH_BOUNDARY", 3, "Breached fence boundary"),
    ],
)

MavMountMode = common.enum(
    "MAV_MOUNT_MODE",
    "Enumeration of possible mount operation modes.",
    [
        ("MAV_MOUNT_MODE_RETRACT", 0, "Load and keep safe position (Roll,Pitch,Yaw) from permanent memory and stop stabilization"),
        ("MAV_MOUNT_MODE_NEUTRAL", 1, "Load and keep neutral position (Roll,Pitch,Yaw) from permanent memory."),
        ("MAV_MOUNT_MODE_MAVLINK_TARGETING", 2, "Load neutral position and start MAVLink Roll,Pitch,Yaw control with stabilization"),
        ("MAV_MOUNT_MODE_RC_TARGETING", 3, "Load neutral position and start RC Roll,Pitch,Yaw control with stabilization"),
        ("MAV_MOUNT_MODE_GPS_POINT", 4, "Load neutral position and start to point to Lat,Lon,Alt"),
    ],
)

# Commands

MavCmd = common.enum(
    "MAV_CMD",
    "Commands to be executed by the MAV. They can be executed on user request, or as part of a mission script. "
    "Each command documents the meaning of its seven generic parameter slots.",
    [
        ("MAV_CMD_NAV_WAYPOINT", 16, "Navigate to waypoint.",
         ("Hold time in decimal seconds (ignored by fixed wing)", "Acceptance radius in meters", "Pass radius in meters (0 to pass through the WP)", "Desired yaw angle at waypoint (rotary wing)", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_LOITER_UNLIM", 17, "Loiter around this waypoint an unlimited amount of time",
         ("Empty", "Empty", "Radius around waypoint, in meters. If positive loiter clockwise, else counter-clockwise", "Desired yaw angle.", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_LOITER_TURNS", 18, "Loiter around this waypoint for X turns",
         ("Turns", "Heading required to leave (0 = False)", "Radius in meters. If positive loiter clockwise, else counter-clockwise", "Loiter exit location relative to the path to the next waypoint", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_LOITER_TIME", 19, "Loiter around this waypoint for X seconds",
         ("Seconds (decimal)", "Heading required to leave (0 = False)", "Radius in meters. If positive loiter clockwise, else counter-clockwise", "Loiter exit location relative to the path to the next waypoint", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_RETURN_TO_LAUNCH", 20, "Return to launch location",
         ("Empty", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_NAV_LAND", 21, "Land at location",
         ("Abort altitude in meters", "Precision land mode", "Empty", "Desired yaw angle", "Latitude", "Longitude", "Altitude (ground level)")),
        ("MAV_CMD_NAV_TAKEOFF", 22, "Takeoff from ground / hand",
         ("Minimum pitch (if airspeed sensor present), desired pitch without sensor", "Empty", "Empty", "Yaw angle (if magnetometer present), ignored without magnetometer", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_LAND_LOCAL", 23, "Land at local position (local frame only)",
         ("Landing target number (if available)", "Maximum accepted offset from desired landing position [m]", "Landing descend rate [ms^-1]", "Desired yaw angle [rad]", "Y-axis position [m]", "X-axis position [m]", "Z-axis / ground level position [m]")),
        ("MAV_CMD_NAV_TAKEOFF_LOCAL", 24, "Takeoff from local position (local frame only)",
         ("Minimum pitch (if airspeed sensor present), desired pitch without sensor [rad]", "Empty", "Takeoff ascend rate [ms^-1]", "Yaw angle [rad] (if magnetometer or another yaw estimation source present)", "Y-axis position [m]", "X-axis position [m]", "Z-axis position [m]")),
        ("MAV_CMD_NAV_FOLLOW", 25, "Vehicle following, i.e. this waypoint represents the position of a moving vehicle",
         ("Following logic to use (e.g. loitering or sinusoidal following)", "Ground speed of vehicle to be followed", "Radius around MISSION, in meters", "Desired yaw angle.", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_CONTINUE_AND_CHANGE_ALT", 30, "Continue on the current course and climb/descend to specified altitude.",
         ("Climb or Descend (0 = Neutral, 1 = Climbing, 2 = Descending)", "Empty", "Empty", "Empty", "Empty", "Empty", "Desired altitude in meters")),
        ("MAV_CMD_NAV_LOITER_TO_ALT", 31, "Begin loiter at the specified Latitude and Longitude. If Lat=Lon=0, then loiter at the current position.",
         ("Heading Required (0 = False)", "Radius in meters", "Empty", "Forward moving aircraft this sets exit xtrack location", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_DO_FOLLOW", 32, "Being following a target",
         ("System ID (the system ID of the FOLLOW_TARGET beacon). Send 0 to disable follow-me", "RESERVED", "RESERVED", "altitude flag: 0: Keep current altitude, 1: keep altitude difference to target, 2: go to a fixed altitude above home", "altitude", "RESERVED", "TTL in seconds in which the MAV should go to the default position hold mode after a message rx timeout")),
        ("MAV_CMD_DO_FOLLOW_REPOSITION", 33, "Reposition the MAV after a follow target command has been sent",
         ("Camera q1 (where 0 is on the ray from the camera to the tracking device)", "Camera q2", "Camera q3", "Camera q4", "altitude offset from target (m)", "X offset from target (m)", "Y offset from target (m)")),
        ("MAV_CMD_NAV_ROI", 80, "Sets the region of interest (ROI) for a sensor set or the vehicle itself.",
         ("Region of interest mode. (see MAV_ROI enum)", "MISSION index/ target ID. (see MAV_ROI enum)", "ROI index (allows a vehicle to manage multiple ROI's)", "Empty", "x the location of the fixed ROI (see MAV_FRAME)", "y", "z")),
        ("MAV_CMD_NAV_PATHPLANNING", 81, "Control autonomous path planning on the MAV.",
         ("0: Disable local obstacle avoidance / local path planning (without resetting map), 1: Enable local path planning, 2: Enable and reset local path planning", "0: Disable full path planning (without resetting map), 1: Enable, 2: Enable and reset map/occupancy grid, 3: Enable and reset planned route, but not occupancy grid", "Empty", "Yaw angle at goal, in compass degrees, [0..360]", "Latitude/X of goal", "Longitude/Y of goal", "Altitude/Z of goal")),
        ("MAV_CMD_NAV_SPLINE_WAYPOINT", 82, "Navigate to waypoint using a spline path.",
         ("Hold time in decimal seconds. (ignored by fixed wing, time to stay at waypoint for rotary wing)", "Empty", "Empty", "Empty", "Latitude/X of goal", "Longitude/Y of goal", "Altitude/Z of goal")),
        ("MAV_CMD_NAV_VTOL_TAKEOFF", 84, "Takeoff from ground using VTOL mode",
         ("Empty", "Front transition heading", "Empty", "Yaw angle in degrees", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_NAV_VTOL_LAND", 85, "Land using VTOL mode",
         ("Empty", "Empty", "Approach altitude (with the same reference as the Altitude field)", "Yaw angle in degrees", "Latitude", "Longitude", "Altitude (ground level)")),
        ("MAV_CMD_NAV_GUIDED_ENABLE", 92, "hand control over to an external controller",
         ("On / Off (> 0.5f on)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_NAV_DELAY", 93, "Delay the next navigation command a number of seconds or until a specified time",
         ("Delay in seconds (decimal, -1 to enable time-of-day fields)", "hour (24h format, UTC, -1 to ignore)", "minute (24h format, UTC, -1 to ignore)", "second (24h format, UTC)", "Empty", "Empty", "Empty")),
        ("MAV_CMD_NAV_PAYLOAD_PLACE", 94, "Descend and place payload. Vehicle descends until it detects a hanging payload has reached the ground.",
         ("Maximum distance to descend (meters)", "Empty", "Empty", "Empty", "Latitude (deg * 1E7)", "Longitude (deg * 1E7)", "Altitude (meters)")),
        ("MAV_CMD_NAV_LAST", 95, "NOP - This command is only used to mark the upper limit of the NAV/ACTION commands in the enumeration",
         ("Empty", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_CONDITION_DELAY", 112, "Delay mission state machine.",
         ("Delay in seconds (decimal)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_CONDITION_CHANGE_ALT", 113, "Ascend/descend at rate.  Delay mission state machine until desired altitude reached.",
         ("Descent / Ascend rate (m/s)", "Empty", "Empty", "Empty", "Empty", "Empty", "Finish Altitude")),
        ("MAV_CMD_CONDITION_DISTANCE", 114, "Delay mission state machine until within desired distance of next NAV point.",
         ("Distance (meters)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_CONDITION_YAW", 115, "Reach a certain target angle.",
         ("target angle: [0-360], 0 is north", "speed during yaw change:[deg per second]", "direction: negative: counter clockwise, positive: clockwise [-1,1]", "relative offset or absolute angle: [ 1,0]", "Empty", "Empty", "Empty")),
        ("MAV_CMD_CONDITION_LAST", 159, "NOP - This command is only used to mark the upper limit of the CONDITION commands in the enumeration",
         ("Empty", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_SET_MODE", 176, "Set system mode.",
         ("Mode, as defined by ENUM MAV_MODE", "Custom mode - this is system specific, please refer to the individual autopilot specifications for details.", "Custom sub mode - this is system specific, please refer to the individual autopilot specifications for details.", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_JUMP", 177, "Jump to the desired command in the mission list.  Repeat this action only the specified number of times",
         ("Sequence number", "Repeat count", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_CHANGE_SPEED", 178, "Change speed and/or throttle set points.",
         ("Speed type (0=Airspeed, 1=Ground Speed)", "Speed  (m/s, -1 indicates no change)", "Throttle  ( Percent, -1 indicates no change)", "absolute or relative [0,1]", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_SET_HOME", 179, "Changes the home location either to the current location or a specified location.",
         ("Use current (1=use current location, 0=use specified location)", "Empty", "Empty", "Empty", "Latitude", "Longitude", "Altitude")),
        ("MAV_CMD_DO_SET_PARAMETER", 180, "Set a system parameter.  Caution!  Use of this command requires knowledge of the numeric enumeration value of the parameter.",
         ("Parameter number", "Parameter value", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_SET_RELAY", 181, "Set a relay to a condition.",
         ("Relay number", "Setting (1=on, 0=off, others possible depending on system hardware)", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_REPEAT_RELAY", 182, "Cycle a relay on and off for a desired number of cycles with a desired period.",
         ("Relay number", "Cycle count", "Cycle time (seconds, decimal)", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_SET_SERVO", 183, "Set a servo to a desired PWM value.",
         ("Servo number", "PWM (microseconds, 1000 to 2000 typical)", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_REPEAT_SERVO", 184, "Cycle a between its nominal setting and a desired PWM for a desired number of cycles with a desired period.",
         ("Servo number", "PWM (microseconds, 1000 to 2000 typical)", "Cycle count", "Cycle time (seconds)", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_FLIGHTTERMINATION", 185, "Terminate flight immediately",
         ("Flight termination activated if > 0.5", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_CHANGE_ALTITUDE", 186, "Change altitude set point.",
         ("Altitude in meters", "Mav frame of new altitude (see MAV_FRAME)", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_LAND_START", 189, "Mission command to perform a landing. This is used as a marker in a mission to tell the autopilot where a sequence of mission items that represents a landing starts.",
         ("Empty", "Empty", "Empty", "Empty", "Latitude", "Longitude", "Empty")),
        ("MAV_CMD_DO_RALLY_LAND", 190, "Mission command to perform a landing from a rally point.",
         ("Break altitude (meters)", "Landing speed (m/s)", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_GO_AROUND", 191, "Mission command to safely abort an autonomous landing.",
         ("Altitude (meters)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_REPOSITION", 192, "Reposition the vehicle to a specific WGS84 global position.",
         ("Ground speed, less than 0 (-1) for default", "Bitmask of option flags, see the MAV_DO_REPOSITION_FLAGS enum.", "Reserved", "Yaw heading, NaN for unchanged.", "Latitude (deg * 1E7)", "Longitude (deg * 1E7)", "Altitude (meters)")),
        ("MAV_CMD_DO_PAUSE_CONTINUE", 193, "If in a GPS controlled position mode, hold the current position or continue.",
         ("0: Pause current mission or reposition command, hold current position. 1: Continue mission.", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved")),
        ("MAV_CMD_DO_SET_REVERSE", 194, "Set moving direction to forward or reverse.",
         ("Direction (0=Forward, 1=Reverse)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_CONTROL_VIDEO", 200, "Control onboard camera system.",
         ("Camera ID (-1 for all)", "Transmission: 0: disabled, 1: enabled compressed, 2: enabled raw", "Transmission mode: 0: video stream, >0: single images every n seconds (decimal)", "Recording: 0: disabled, 1: enabled compressed, 2: enabled raw", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_SET_ROI", 201, "Sets the region of interest (ROI) for a sensor set or the vehicle itself.",
         ("Region of interest mode. (see MAV_ROI enum)", "MISSION index/ target ID. (see MAV_ROI enum)", "ROI index (allows a vehicle to manage multiple ROI's)", "Empty", "MAV_ROI_WPNEXT: pitch offset from next waypoint, MAV_ROI_LOCATION: latitude", "MAV_ROI_WPNEXT: roll offset from next waypoint, MAV_ROI_LOCATION: longitude", "MAV_ROI_WPNEXT: yaw offset from next waypoint, MAV_ROI_LOCATION: altitude")),
        ("MAV_CMD_DO_DIGICAM_CONFIGURE", 202, "Mission command to configure an on-board camera controller system.",
         ("Modes: P, TV, AV, M, Etc", "Shutter speed: Divisor number for one second", "Aperture: F stop number", "ISO number e.g. 80, 100, 200, Etc", "Exposure type enumerator", "Command Identity", "Main engine cut-off time before camera trigger in seconds/10 (0 means no cut-off)")),
        ("MAV_CMD_DO_DIGICAM_CONTROL", 203, "Mission command to control an on-board camera controller system.",
         ("Session control e.g. show/hide lens", "Zoom's absolute position", "Zooming step value to offset zoom from the current position", "Focus Locking, Unlocking or Re-locking", "Shooting Command", "Command Identity", "Test shot identifier. If set to 1, image will only be captured, but not counted towards internal frame count.")),
        ("MAV_CMD_DO_MOUNT_CONFIGURE", 204, "Mission command to configure a camera or antenna mount",
         ("Mount operation mode (see MAV_MOUNT_MODE enum)", "stabilize roll? (1 = yes, 0 = no)", "stabilize pitch? (1 = yes, 0 = no)", "stabilize yaw? (1 = yes, 0 = no)", "roll input (0 = angle, 1 = angular rate)", "pitch input (0 = angle, 1 = angular rate)", "yaw input (0 = angle, 1 = angular rate)")),
        ("MAV_CMD_DO_MOUNT_CONTROL", 205, "Mission command to control a camera or antenna mount",
         ("pitch depending on mount mode (degrees or degrees/second depending on pitch input).", "roll depending on mount mode (degrees or degrees/second depending on roll input).", "yaw depending on mount mode (degrees or degrees/second depending on yaw input).", "altitude depending on mount mode.", "latitude in degrees * 1E7, set if appropriate mount mode.", "longitude in degrees * 1E7, set if appropriate mount mode.", "MAV_MOUNT_MODE enum value")),
        ("MAV_CMD_DO_SET_CAM_TRIGG_DIST", 206, "Mission command to set camera trigger distance for this flight. The camera is triggered each time this distance is exceeded.",
         ("Camera trigger distance (meters). 0 to stop triggering.", "Camera shutter integration time (milliseconds). -1 or 0 to ignore", "Trigger camera once immediately. (0 = no trigger, 1 = trigger)", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_FENCE_ENABLE", 207, "Mission command to enable the geofence",
         ("enable? (0=disable, 1=enable, 2=disable_floor_only)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_PARACHUTE", 208, "Mission command to trigger a parachute",
         ("action (0=disable, 1=enable, 2=release, for some systems see PARACHUTE_ACTION enum, not in general message set.)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_MOTOR_TEST", 209, "Mission command to perform motor test",
         ("motor number (a number from 1 to max number of motors on the vehicle)", "throttle type (0=throttle percentage, 1=PWM, 2=pilot throttle channel pass-through. See MOTOR_TEST_THROTTLE_TYPE enum)", "throttle", "timeout (in seconds)", "motor count (number of motors to test to test in sequence, waiting for the timeout above between them; 0=1 motor, 1=1 motor, 2=2 motors...)", "motor test order (See MOTOR_TEST_ORDER enum)", "Empty")),
        ("MAV_CMD_DO_INVERTED_FLIGHT", 210, "Change to/from inverted flight",
         ("inverted (0=normal, 1=inverted)", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_NAV_SET_YAW_SPEED", 213, "Sets a desired vehicle turn angle and speed change",
         ("yaw angle to adjust steering by in centidegress", "speed - normalized to 0 .. 1", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_SET_CAM_TRIGG_INTERVAL", 214, "Mission command to set camera trigger interval for this flight.",
         ("Camera trigger cycle time (milliseconds). -1 or 0 to ignore.", "Camera shutter integration time (milliseconds). Should be less than trigger cycle time. -1 or 0 to ignore.", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_MOUNT_CONTROL_QUAT", 220, "Mission command to control a camera or antenna mount, using a quaternion as reference.",
         ("q1 - quaternion param #1, w (1 in null-rotation)", "q2 - quaternion param #2, x (0 in null-rotation)", "q3 - quaternion param #3, y (0 in null-rotation)", "q4 - quaternion param #4, z (0 in null-rotation)", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_GUIDED_MASTER", 221, "set id of master controller",
         ("System ID", "Component ID", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_GUIDED_LIMITS", 222, "set limits for external control",
         ("timeout - maximum time (in seconds) that external controller will be allowed to control vehicle. 0 means no timeout", "absolute altitude min (in meters, AMSL) - if vehicle moves below this alt, the command will be aborted and the mission will continue.  0 means no lower altitude limit", "absolute altitude max (in meters)- if vehicle moves above this alt, the command will be aborted and the mission will continue.  0 means no upper altitude limit", "horizontal move limit (in meters, AMSL) - if vehicle moves more than this distance from its location at the moment the command was executed, the command will be aborted and the mission will continue. 0 means no horizontal altitude limit", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_ENGINE_CONTROL", 223, "Control vehicle engine.",
         ("0: Stop engine, 1:Start Engine", "0: Warm start, 1:Cold start. Controls use of choke where applicable", "Height delay (meters). This is for commanding engine start only after the vehicle has gained the specified height.", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_DO_LAST", 240, "NOP - This command is only used to mark the upper limit of the DO commands in the enumeration",
         ("Empty", "Empty", "Empty", "Empty", "Empty", "Empty", "Empty")),
        ("MAV_CMD_PREFLIGHT_CALIBRATION", 241, "Trigger calibration. This command will be only accepted if in pre-flight mode.",
         ("1: gyro calibration, 3: gyro temperature calibration", "1: magnetometer calibration", "1: ground pressure calibration", "1: radio RC calibration, 2: RC trim calibration", "1: accelerometer calibration, 2: board level calibration, 3: accelerometer temperature calibration, 4: simple accelerometer calibration", "1: APM: compass/motor interference calibration (PX4: airspeed calibration, deprecated), 2: airspeed calibration", "1: ESC calibration, 3: barometer temperature calibration")),
        ("MAV_CMD_PREFLIGHT_SET_SENSOR_OFFSETS", 242, "Set sensor offsets. This command will be only accepted if in pre-flight mode.",
         ("Sensor to adjust the offsets for: 0: gyros, 1: accelerometer, 2: magnetometer, 3: barometer, 4: optical flow, 5: second magnetometer, 6: third magnetometer", "X axis offset (or generic dimension 1), in the sensor's raw units", "Y axis offset (or generic dimension 2), in the sensor's raw units", "Z axis offset (or generic dimension 3), in the sensor's raw units", "Generic dimension 4, in the sensor's raw units", "Generic dimension 5, in the sensor's raw units", "Generic dimension 6, in the sensor's raw units")),
        ("MAV_CMD_PREFLIGHT_UAVCAN", 243, "Trigger UAVCAN config. This command will be only accepted if in pre-flight mode.",
         ("1: Trigger actuator ID assignment and direction mapping.", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved")),
        ("MAV_CMD_PREFLIGHT_STORAGE", 245, "Request storage of different parameter values and logs. This command will be only accepted if in pre-flight mode.",
         ("Parameter storage: 0: READ FROM FLASH/EEPROM, 1: WRITE CURRENT TO FLASH/EEPROM, 2: Reset to defaults", "Mission storage: 0: READ FROM FLASH/EEPROM, 1: WRITE CURRENT TO FLASH/EEPROM, 2: Reset to defaults", "Onboard logging: 0: Ignore, 1: Start default rate logging, -1: Stop logging, > 1: start logging with rate of param 3 in Hz (e.g. set to 1000 for 1000 Hz logging)", "Reserved", "Empty", "Empty", "Empty")),
        ("MAV_CMD_PREFLIGHT_REBOOT_SHUTDOWN", 246, "Request the reboot or shutdown of system components.",
         ("0: Do nothing for autopilot, 1: Reboot autopilot, 2: Shutdown autopilot, 3: Reboot autopilot and keep it in the bootloader until upgraded.", "0: Do nothing for onboard computer, 1: Reboot onboard computer, 2: Shutdown onboard computer, 3: Reboot onboard computer and keep it in the bootloader until upgraded.", "WIP: 0: Do nothing for camera, 1: Reboot onboard camera, 2: Shutdown onboard camera, 3: Reboot onboard camera and keep it in the bootloader until upgraded", "WIP: 0: Do nothing for mount (e.g. gimbal), 1: Reboot mount, 2: Shutdown mount, 3: Reboot mount and keep it in the bootloader until upgraded", "Reserved, send 0", "Reserved, send 0", "WIP: ID (e.g. camera ID -1 for all IDs)")),
        ("MAV_CMD_OVERRIDE_GOTO", 252, "Hold / continue the current action",
         ("MAV_GOTO_DO_HOLD: hold MAV_GOTO_DO_CONTINUE: continue with next item in mission plan", "MAV_GOTO_HOLD_AT_CURRENT_POSITION: Hold at current position MAV_GOTO_HOLD_AT_SPECIFIED_POSITION: hold at specified position", "MAV_FRAME coordinate frame of hold point", "Desired yaw angle in degrees", "Latitude / X position", "Longitude / Y position", "Altitude / Z position")),
        ("MAV_CMD_MISSION_START", 300, "start running a mission",
         ("first_item: the first mission item to run", "last_item:  the last mission item to run (after this item is run, the mission ends)")),
        ("MAV_CMD_COMPONENT_ARM_DISARM", 400, "Arms / Disarms a component",
         ("1 to arm, 0 to disarm",)),
        ("MAV_CMD_GET_HOME_POSITION", 410, "Request the home position from the vehicle.",
         ("Reserved", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved")),
        ("MAV_CMD_START_RX_PAIR", 500, "Starts receiver pairing",
         ("0:Spektrum", "RC type (see RC_TYPE enum)")),
        ("MAV_CMD_GET_MESSAGE_INTERVAL", 510, "Request the interval between messages for a particular MAVLink message ID",
         ("The MAVLink message ID",)),
        ("MAV_CMD_SET_MESSAGE_INTERVAL", 511, "Set the interval between messages for a particular MAVLink message ID. This interface replaces REQUEST_DATA_STREAM",
         ("The MAVLink message ID", "The interval between two messages, in microseconds. Set to -1 to disable and 0 to request default rate.")),
        ("MAV_CMD_REQUEST_PROTOCOL_VERSION", 519, "Request MAVLink protocol version compatibility",
         ("1: Request supported protocol versions by all nodes on the network", "Reserved (all remaining params)")),
        ("MAV_CMD_REQUEST_AUTOPILOT_CAPABILITIES", 520, "Request autopilot capabilities",
         ("1: Request autopilot version", "Reserved (all remaining params)")),
        ("MAV_CMD_REQUEST_CAMERA_INFORMATION", 521, "Request camera information (CAMERA_INFORMATION).",
         ("0: No action 1: Request camera capabilities", "Reserved (all remaining params)")),
        ("MAV_CMD_REQUEST_CAMERA_SETTINGS", 522, "Request camera settings (CAMERA_SETTINGS).",
         ("0: No Action 1: Request camera settings", "Reserved (all remaining params)")),
        ("MAV_CMD_REQUEST_STORAGE_INFORMATION", 525, "Request storage information (STORAGE_INFORMATION).",
         ("Storage ID (0 for all, 1 for first, 2 for second, etc.)", "0: No Action 1: Request storage information", "Reserved (all remaining params)")),
        ("MAV_CMD_STORAGE_FORMAT", 526, "Format a storage medium. Once format is complete, a STORAGE_INFORMATION message is sent.",
         ("Storage ID (1 for first, 2 for second, etc.)", "0: No action 1: Format storage", "Reserved (all remaining params)")),
        ("MAV_CMD_REQUEST_CAMERA_CAPTURE_STATUS", 527, "Request camera capture status (CAMERA_CAPTURE_STATUS)",
         ("0: No Action 1: Request camera capture status", "Reserved (all remaining params)")),
        ("MAV_CMD_REQUEST_FLIGHT_INFORMATION", 528, "Request flight information (FLIGHT_INFORMATION)",
         ("1: Request flight information", "Reserved (all remaining params)")),
        ("MAV_CMD_RESET_CAMERA_SETTINGS", 529, "Reset all camera settings to Factory Default",
         ("0: No Action 1: Reset all settings", "Reserved (all remaining params)")),
        ("MAV_CMD_SET_CAMERA_MODE", 530, "Set camera running mode. Use NaN for reserved values.",
         ("Reserved (Set to 0)", "Camera mode (see CAMERA_MODE enum)", "Reserved (all remaining params)")),
        ("MAV_CMD_IMAGE_START_CAPTURE", 2000, "Start image capture sequence. Sends CAMERA_IMAGE_CAPTURED after each capture.",
         ("Reserved (Set to 0)", "Duration between two consecutive pictures (in seconds)", "Number of images to capture total - 0 for unlimited capture", "Capture sequence (ID to prevent double captures when a command is retransmitted, 0: unused, >= 1: used)", "Reserved (all remaining params)")),
        ("MAV_CMD_IMAGE_STOP_CAPTURE", 2001, "Stop image capture sequence",
         ("Reserved (Set to 0)", "Reserved (all remaining params)")),
        ("MAV_CMD_DO_TRIGGER_CONTROL", 2003, "Enable or disable on-board camera triggering system.",
         ("Trigger enable/disable (0 for disable, 1 for start), -1 to ignore", "1 to reset the trigger sequence, -1 or 0 to ignore", "1 to pause triggering, but without switching the camera off or retracting it. -1 to ignore")),
        ("MAV_CMD_VIDEO_START_CAPTURE", 2500, "Starts video capture (recording). Use NaN for reserved values.",
         ("Reserved (Set to 0)", "Frequency CAMERA_CAPTURE_STATUS messages should be sent while recording (0 for no messages, otherwise frequency in Hz)", "Reserved (all remaining params)")),
        ("MAV_CMD_VIDEO_STOP_CAPTURE", 2501, "Stop the current video capture (recording). Use NaN for reserved values.",
         ("Reserved (Set to 0)", "Reserved (all remaining params)")),
        ("MAV_CMD_LOGGING_START", 2510, "Request to start streaming logging data over MAVLink (see also LOGGING_DATA message)",
         ("Format: 0: ULog", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)")),
        ("MAV_CMD_LOGGING_STOP", 2511, "Request to stop streaming log data over MAVLink",
         ("Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)", "Reserved (set to 0)")),
        ("MAV_CMD_PANORAMA_CREATE", 2800, "Create a panorama at the current position",
         ("Viewing angle horizontal of the panorama (in degrees, +- 0.5 the total angle)", "Viewing angle vertical of panorama (in degrees)", "Speed of the horizontal rotation (in degrees per second)", "Speed of the vertical rotation (in degrees per second)")),
        ("MAV_CMD_DO_VTOL_TRANSITION", 3000, "Request VTOL transition",
         ("The target VTOL state, as defined by ENUM MAV_VTOL_STATE. Only MAV_VTOL_STATE_MC and MAV_VTOL_STATE_FW can be used.",)),
        ("MAV_CMD_SET_GUIDED_SUBMODE_STANDARD", 4000, "This command sets the submode to standard guided when vehicle is in guided mode. The vehicle holds position and altitude and the user can input the desired velocities along all three axes.",
         ()),
        ("MAV_CMD_SET_GUIDED_SUBMODE_CIRCLE", 4001, "This command sets submode circle when vehicle is in guided mode. Vehicle flies along a circle facing the center of the circle.",
         ("Radius of desired circle in CIRCLE_MODE", "User defined", "User defined", "User defined", "Unscaled target latitude of center of circle in CIRCLE_MODE", "Unscaled target longitude of center of circle in CIRCLE_MODE")),
        ("MAV_CMD_PAYLOAD_PREPARE_DEPLOY", 30001, "Deploy payload on a Lat / Lon / Alt position. This includes the navigation to reach the required release position and velocity.",
         ("Operation mode. 0: prepare single payload deploy (overwriting previous requests), but do not execute it. 1: execute payload deploy immediately (rejecting further deploy commands during execution, but allowing abort). 2: add payload deploy to existing deployment list.", "Desired approach vector in degrees compass heading (0..360). A negative value indicates the system can define the approach vector at will.", "Desired ground speed at release time. This can be overridden by the airframe in case it needs to meet minimum airspeed. A negative value indicates the system can define the ground speed at will.", "Minimum altitude clearance to the release position in meters. A negative value indicates the system can define the clearance at will.", "Latitude unscaled for MISSION_ITEM or in 1e7 degrees for MISSION_ITEM_INT", "Longitude unscaled for MISSION_ITEM or in 1e7 degrees for MISSION_ITEM_INT", "Altitude, in meters AMSL")),
        ("MAV_CMD_PAYLOAD_CONTROL_DEPLOY", 30002, "Control the payload deployment.",
         ("Operation mode. 0: Abort deployment, continue normal mission. 1: switch to payload deployment mode. 100: delete first payload deployment request. 101: delete all payload deployment requests.", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved", "Reserved")),
    ],
)

# Results and status codes

MavParamType = common.enum(
    "MAV_PARAM_TYPE",
    "Specifies the datatype of a MAVLink parameter.",
    [
        ("MAV_PARAM_TYPE_UINT8", 1, "8-bit unsigned integer"),
        ("MAV_PARAM_TYPE_INT8", 2, "8-bit signed integer"),
        ("MAV_PARAM_TYPE_UINT16", 3, "16-bit unsigned integer"),
        ("MAV_PARAM_TYPE_INT16", 4, "16-bit signed integer"),
        ("MAV_PARAM_TYPE_UINT32", 5, "32-bit unsigned integer"),
        ("MAV_PARAM_TYPE_INT32", 6, "32-bit signed integer"),
        ("MAV_PARAM_TYPE_UINT64", 7, "64-bit unsigned integer"),
        ("MAV_PARAM_TYPE_INT64", 8, "64-bit signed integer"),
        ("MAV_PARAM_TYPE_REAL32", 9, "32-bit floating-point"),
        ("MAV_PARAM_TYPE_REAL64", 10, "64-bit floating-point"),
    ],
)

MavResult = common.enum(
    "MAV_RESULT",
    "Result from a MAVLink command (MAV_CMD)",
    [
        ("MAV_RESULT_ACCEPTED", 0, "Command ACCEPTED and EXECUTED"),
        ("MAV_RESULT_TEMPORARILY_REJECTED", 1, "Command TEMPORARY REJECTED/DENIED"),
        ("MAV_RESULT_DENIED", 2, "Command PERMANENTLY DENIED"),
        ("MAV_RESULT_UNSUPPORTED", 3, "Command UNKNOWN/UNSUPPORTED"),
        ("MAV_RESULT_FAILED", 4, "Command executed, but failed"),
        ("MAV_RESULT_IN_PROGRESS", 5, "WIP: Command being executed"),
    ],
)

MavMissionResult = common.enum(
    "MAV_MISSION_RESULT",
    "Result of mission operation (in a MISSION_ACK message).",
    [
        ("MAV_MISSION_ACCEPTED", 0, "mission accepted OK"),
        ("MAV_MISSION_ERROR", 1, "Generic error / not accepting mission commands at all right now."),
        ("MAV_MISSION_UNSUPPORTED_FRAME", 2, "Coordinate frame is not supported."),
        ("MAV_MISSION_UNSUPPORTED", 3, "Command is not supported."),
        ("MAV_MISSION_NO_SPACE", 4, "Mission item exceeds storage space."),
        ("MAV_MISSION_INVALID", 5, "One of the parameters has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM1", 6, "param1 has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM2", 7, "param2 has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM3", 8, "param3 has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM4", 9, "param4 has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM5_X", 10, "x / param5 has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM6_Y", 11, "y / param6 has an invalid value."),
        ("MAV_MISSION_INVALID_PARAM7", 12, "z / param7 has an invalid value."),
        ("MAV_MISSION_INVALID_SEQUENCE", 13, "Mission item received out of sequence"),
        ("MAV_MISSION_DENIED", 14, "Not accepting any mission commands from this communication partner."),
    ],
)

MavSeverity = common.enum(
    "MAV_SEVERITY",
    "Indicates the severity level, generally used for status messages to indicate their relative urgency. Based on RFC-5424.",
    [
        ("MAV_SEVERITY_EMERGENCY", 0, "System is unusable. This is a \"panic\" condition."),
        ("MAV_SEVERITY_ALERT", 1, "Action should be taken immediately. Indicates error in non-critical systems."),
        ("MAV_SEVERITY_CRITICAL", 2, "Action must be taken immediately. Indicates failure in a primary system."),
        ("MAV_SEVERITY_ERROR", 3, "Indicates an error in secondary/redundant systems."),
        ("MAV_SEVERITY_WARNING", 4, "Indicates about a possible future error if this is not resolved within a given timeframe."),
        ("MAV_SEVERITY_NOTICE", 5, "An unusual event has occurred, though not an error condition."),
        ("MAV_SEVERITY_INFO", 6, "Normal operational messages. Useful for logging. No action is required for these messages."),
        ("MAV_SEVERITY_DEBUG", 7, "Useful non-operational messages that can assist in debugging."),
    ],
)

MavPowerStatus = common.enum(
    "MAV_POWER_STATUS",
    "Power supply status flags (bitmask)",
    [
        ("MAV_POWER_STATUS_BRICK_VALID", 1, "main brick power supply valid"),
        ("MAV_POWER_STATUS_SERVO_VALID", 2, "main servo power supply valid for FMU"),
        ("MAV_POWER_STATUS_USB_CONNECTED", 4, "USB power is connected"),
        ("MAV_POWER_STATUS_PERIPH_OVERCURRENT", 8, "peripheral supply is in over-current state"),
        ("MAV_POWER_STATUS_PERIPH_HIPOWER_OVERCURRENT", 16, "hi-power peripheral supply is in over-current state"),
        ("MAV_POWER_STATUS_CHANGED", 32, "Power status has changed since boot"),
    ],
    bitmask=True,
)

SerialControlDev = common.enum(
    "SERIAL_CONTROL_DEV",
    "SERIAL_CONTROL device types",
    [
        ("SERIAL_CONTROL_DEV_TELEM1", 0, "First telemetry port"),
        ("SERIAL_CONTROL_DEV_TELEM2", 1, "Second telemetry port"),
        ("SERIAL_CONTROL_DEV_GPS1", 2, "First GPS port"),
        ("SERIAL_CONTROL_DEV_GPS2", 3, "Second GPS port"),
        ("SERIAL_CONTROL_DEV_SHELL", 10, "system shell"),
    ],
)

SerialControlFlag = common.enum(
    "SERIAL_CONTROL_FLAG",
    "SERIAL_CONTROL flags (bitmask)",
    [
        ("SERIAL_CONTROL_FLAG_REPLY", 1, "Set if this is a reply"),
        ("SERIAL_CONTROL_FLAG_RESPOND", 2, "Set if the sender wants the receiver to send a response as another SERIAL_CONTROL message"),
        ("SERIAL_CONTROL_FLAG_EXCLUSIVE", 4, "Set if access to the serial port should be removed from whatever driver is currently using it, giving exclusive access to the SERIAL_CONTROL protocol."),
        ("SERIAL_CONTROL_FLAG_BLOCKING", 8, "Block on writes to the serial port"),
        ("SERIAL_CONTROL_FLAG_MULTI", 16, "Send multiple replies until port is drained"),
    ],
    bitmask=True,
)

# Sensors

MavDistanceSensor = common.enum(
    "MAV_DISTANCE_SENSOR",
    "Enumeration of distance sensor types",
    [
        ("MAV_DISTANCE_SENSOR_LASER", 0, "Laser rangefinder, e.g. LightWare SF02/F or PulsedLight units"),
        ("MAV_DISTANCE_SENSOR_ULTRASOUND", 1, "Ultrasound rangefinder, e.g. MaxBotix units"),
        ("MAV_DISTANCE_SENSOR_INFRARED", 2, "Infrared rangefinder, e.g. Sharp units"),
        ("MAV_DISTANCE_SENSOR_RADAR", 3, "Radar type, e.g. uLanding units"),
        ("MAV_DISTANCE_SENSOR_UNKNOWN", 4, "Broken or unknown type, e.g. analog units"),
    ],
)

MavSensorOrientation = common.enum(
    "MAV_SENSOR_ORIENTATION",
    "Enumeration of sensor orientation, according to its rotations",
    [
        ("MAV_SENSOR_ROTATION_NONE", 0, "Roll: 0, Pitch: 0, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_YAW_45", 1, "Roll: 0, Pitch: 0, Yaw: 45"),
        ("MAV_SENSOR_ROTATION_YAW_90", 2, "Roll: 0, Pitch: 0, Yaw: 90"),
        ("MAV_SENSOR_ROTATION_YAW_135", 3, "Roll: 0, Pitch: 0, Yaw: 135"),
        ("MAV_SENSOR_ROTATION_YAW_180", 4, "Roll: 0, Pitch: 0, Yaw: 180"),
        ("MAV_SENSOR_ROTATION_YAW_225", 5, "Roll: 0, Pitch: 0, Yaw: 225"),
        ("MAV_SENSOR_ROTATION_YAW_270", 6, "Roll: 0, Pitch: 0, Yaw: 270"),
        ("MAV_SENSOR_ROTATION_YAW_315", 7, "Roll: 0, Pitch: 0, Yaw: 315"),
        ("MAV_SENSOR_ROTATION_ROLL_180", 8, "Roll: 180, Pitch: 0, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_180_YAW_45", 9, "Roll: 180, Pitch: 0, Yaw: 45"),
        ("MAV_SENSOR_ROTATION_ROLL_180_YAW_90", 10, "Roll: 180, Pitch: 0, Yaw: 90"),
        ("MAV_SENSOR_ROTATION_ROLL_180_YAW_135", 11, "Roll: 180, Pitch: 0, Yaw: 135"),
        ("MAV_SENSOR_ROTATION_PITCH_180", 12, "Roll: 0, Pitch: 180, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_180_YAW_225", 13, "Roll: 180, Pitch: 0, Yaw: 225"),
        ("MAV_SENSOR_ROTATION_ROLL_180_YAW_270", 14, "Roll: 180, Pitch: 0, Yaw: 270"),
        ("MAV_SENSOR_ROTATION_ROLL_180_YAW_315", 15, "Roll: 180, Pitch: 0, Yaw: 315"),
        ("MAV_SENSOR_ROTATION_ROLL_90", 16, "Roll: 90, Pitch: 0, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_90_YAW_45", 17, "Roll: 90, Pitch: 0, Yaw: 45"),
        ("MAV_SENSOR_ROTATION_ROLL_90_YAW_90", 18, "Roll: 90, Pitch: 0, Yaw: 90"),
        ("MAV_SENSOR_ROTATION_ROLL_90_YAW_135", 19, "Roll: 90, Pitch: 0, Yaw: 135"),
        ("MAV_SENSOR_ROTATION_ROLL_270", 20, "Roll: 270, Pitch: 0, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_270_YAW_45", 21, "Roll: 270, Pitch: 0, Yaw: 45"),
        ("MAV_SENSOR_ROTATION_ROLL_270_YAW_90", 22, "Roll: 270, Pitch: 0, Yaw: 90"),
        ("MAV_SENSOR_ROTATION_ROLL_270_YAW_135", 23, "Roll: 270, Pitch: 0, Yaw: 135"),
        ("MAV_SENSOR_ROTATION_PITCH_90", 24, "Roll: 0, Pitch: 90, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_PITCH_270", 25, "Roll: 0, Pitch: 270, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_PITCH_180_YAW_90", 26, "Roll: 0, Pitch: 180, Yaw: 90"),
        ("MAV_SENSOR_ROTATION_PITCH_180_YAW_270", 27, "Roll: 0, Pitch: 180, Yaw: 270"),
        ("MAV_SENSOR_ROTATION_ROLL_90_PITCH_90", 28, "Roll: 90, Pitch: 90, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_180_PITCH_90", 29, "Roll: 180, Pitch: 90, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_270_PITCH_90", 30, "Roll: 270, Pitch: 90, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_90_PITCH_180", 31, "Roll: 90, Pitch: 180, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_270_PITCH_180", 32, "Roll: 270, Pitch: 180, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_90_PITCH_270", 33, "Roll: 90, Pitch: 270, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_180_PITCH_270", 34, "Roll: 180, Pitch: 270, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_270_PITCH_270", 35, "Roll: 270, Pitch: 270, Yaw: 0"),
        ("MAV_SENSOR_ROTATION_ROLL_90_PITCH_180_YAW_90", 36, "Roll: 90, Pitch: 180, Yaw: 90"),
        ("MAV_SENSOR_ROTATION_ROLL_90_YAW_270", 37, "Roll: 90, Pitch: 0, Yaw: 270"),
        ("MAV_SENSOR_ROTATION_ROLL_315_PITCH_315_YAW_315", 38, "Roll: 315, Pitch: 315, Yaw: 315"),
    ],
)

MavProtocolCapability = common.enum(
    "MAV_PROTOCOL_CAPABILITY",
    "Bitmask of (optional) autopilot capabilities (64 bit). If a bit is set, the autopilot supports this capability.",
    [
        ("MAV_PROTOCOL_CAPABILITY_MISSION_FLOAT", 1, "Autopilot supports MISSION float message type."),
        ("MAV_PROTOCOL_CAPABILITY_PARAM_FLOAT", 2, "Autopilot supports the new param float message type."),
        ("MAV_PROTOCOL_CAPABILITY_MISSION_INT", 4, "Autopilot supports MISSION_INT scaled integer message type."),
        ("MAV_PROTOCOL_CAPABILITY_COMMAND_INT", 8, "Autopilot supports COMMAND_INT scaled integer message type."),
        ("MAV_PROTOCOL_CAPABILITY_PARAM_UNION", 16, "Autopilot supports the new param union message type."),
        ("MAV_PROTOCOL_CAPABILITY_FTP", 32, "Autopilot supports the new FILE_TRANSFER_PROTOCOL message type."),
        ("MAV_PROTOCOL_CAPABILITY_SET_ATTITUDE_TARGET", 64, "Autopilot supports commanding attitude offboard."),
        ("MAV_PROTOCOL_CAPABILITY_SET_POSITION_TARGET_LOCAL_NED", 128, "Autopilot supports commanding position and velocity targets in local NED frame."),
        ("MAV_PROTOCOL_CAPABILITY_SET_POSITION_TARGET_GLOBAL_INT", 256, "Autopilot supports commanding position and velocity targets in global scaled integers."),
        ("MAV_PROTOCOL_CAPABILITY_TERRAIN", 512, "Autopilot supports terrain protocol / data handling."),
        ("MAV_PROTOCOL_CAPABILITY_SET_ACTUATOR_TARGET", 1024, "Autopilot supports direct actuator control."),
        ("MAV_PROTOCOL_CAPABILITY_FLIGHT_TERMINATION", 2048, "Autopilot supports the flight termination command."),
        ("MAV_PROTOCOL_CAPABILITY_COMPASS_CALIBRATION", 4096, "Autopilot supports onboard compass calibration."),
        ("MAV_PROTOCOL_CAPABILITY_MAVLINK2", 8192, "Autopilot supports MAVLink version 2."),
        ("MAV_PROTOCOL_CAPABILITY_MISSION_FENCE", 16384, "Autopilot supports mission fence protocol."),
        ("MAV_PROTOCOL_CAPABILITY_MISSION_RALLY", 32768, "Autopilot supports mission rally point protocol."),
        ("MAV_PROTOCOL_CAPABILITY_FLIGHT_INFORMATION", 65536, "Autopilot supports the flight information protocol."),
    ],
    bitmask=True,
)

MavEstimatorType = common.enum(
    "MAV_ESTIMATOR_TYPE",
    "Enumeration of estimator types",
    [
        ("MAV_ESTIMATOR_TYPE_NAIVE", 1, "This is a naive estimator without any real covariance feedback."),
        ("MAV_ESTIMATOR_TYPE_VISION", 2, "Computer vision based estimate. Might be up to scale."),
        ("MAV_ESTIMATOR_TYPE_VIO", 3, "Visual-inertial estimate."),
        ("MAV_ESTIMATOR_TYPE_GPS", 4, "Plain GPS estimate."),
        ("MAV_ESTIMATOR_TYPE_GPS_INS", 5, "Estimator integrating GPS and inertial sensing."),
    ],
)

MavBatteryType = common.enum(
    "MAV_BATTERY_TYPE",
    "Enumeration of battery types",
    [
        ("MAV_BATTERY_TYPE_UNKNOWN", 0, "Not specified."),
        ("MAV_BATTERY_TYPE_LIPO", 1, "Lithium polymer battery"),
        ("MAV_BATTERY_TYPE_LIFE", 2, "Lithium-iron-phosphate battery"),
        ("MAV_BATTERY_TYPE_LION", 3, "Lithium-ION battery"),
        ("MAV_BATTERY_TYPE_NIMH", 4, "Nickel metal hydride battery"),
    ],
)

MavBatteryFunction = common.enum(
    "MAV_BATTERY_FUNCTION",
    "Enumeration of battery functions",
    [
        ("MAV_BATTERY_FUNCTION_UNKNOWN", 0, "Battery function is unknown"),
        ("MAV_BATTERY_FUNCTION_ALL", 1, "Battery supports all flight systems"),
        ("MAV_BATTERY_FUNCTION_PROPULSION", 2, "Battery for the propulsion system"),
        ("MAV_BATTERY_FUNCTION_AVIONICS", 3, "Avionics battery"),
        ("MAV_BATTERY_FUNCTION_PAYLOAD", 4, "Payload battery"),
    ],
)

GpsFixType = common.enum(
    "GPS_FIX_TYPE",
    "Type of GPS fix",
    [
        ("GPS_FIX_TYPE_NO_GPS", 0, "No GPS connected"),
        ("GPS_FIX_TYPE_NO_FIX", 1, "No position information, GPS is connected"),
        ("GPS_FIX_TYPE_2D_FIX", 2, "2D position"),
        ("GPS_FIX_TYPE_3D_FIX", 3, "3D position"),
        ("GPS_FIX_TYPE_DGPS", 4, "DGPS/SBAS aided 3D position"),
        ("GPS_FIX_TYPE_RTK_FLOAT", 5, "RTK float, 3D position"),
        ("GPS_FIX_TYPE_RTK_FIXED", 6, "RTK Fixed, 3D position"),
        ("GPS_FIX_TYPE_STATIC", 7, "Static fixed, typically used for base stations"),
    ],
)

GpsInputIgnoreFlags = common.enum(
    "GPS_INPUT_IGNORE_FLAGS",
    "Fields of GPS_INPUT that the receiver should ignore",
    [
        ("GPS_INPUT_IGNORE_FLAG_ALT", 1, "ignore altitude field"),
        ("GPS_INPUT_IGNORE_FLAG_HDOP", 2, "ignore hdop field"),
        ("GPS_INPUT_IGNORE_FLAG_VDOP", 4, "ignore vdop field"),
        ("GPS_INPUT_IGNORE_FLAG_VEL_HORIZ", 8, "ignore horizontal velocity field (vn and ve)"),
        ("GPS_INPUT_IGNORE_FLAG_VEL_VERT", 16, "ignore vertical velocity field (vd)"),
        ("GPS_INPUT_IGNORE_FLAG_SPEED_ACCURACY", 32, "ignore speed accuracy field"),
        ("GPS_INPUT_IGNORE_FLAG_HORIZONTAL_ACCURACY", 64, "ignore horizontal accuracy field"),
        ("GPS_INPUT_IGNORE_FLAG_VERTICAL_ACCURACY", 128, "ignore vertical accuracy field"),
    ],
    bitmask=True,
)

EstimatorStatusFlags = common.enum(
    "ESTIMATOR_STATUS_FLAGS",
    "Flags in ESTIMATOR_STATUS message",
    [
        ("ESTIMATOR_ATTITUDE", 1, "True if the attitude estimate is good"),
        ("ESTIMATOR_VELOCITY_HORIZ", 2, "True if the horizontal velocity estimate is good"),
        ("ESTIMATOR_VELOCITY_VERT", 4, "True if the  vertical velocity estimate is good"),
        ("ESTIMATOR_POS_HORIZ_REL", 8, "True if the horizontal position (relative) estimate is good"),
        ("ESTIMATOR_POS_HORIZ_ABS", 16, "True if the horizontal position (absolute) estimate is good"),
        ("ESTIMATOR_POS_VERT_ABS", 32, "True if the vertical position (absolute) estimate is good"),
        ("ESTIMATOR_POS_VERT_AGL", 64, "True if the vertical position (above ground) estimate is good"),
        ("ESTIMATOR_CONST_POS_MODE", 128, "True if the EKF is in a constant position mode and is not using external measurements (eg GPS or optical flow)"),
        ("ESTIMATOR_PRED_POS_HORIZ_REL", 256, "True if the EKF has sufficient data to enter a mode that will provide a (relative) position estimate"),
        ("ESTIMATOR_PRED_POS_HORIZ_ABS", 512, "True if the EKF has sufficient data to enter a mode that will provide a (absolute) position estimate"),
        ("ESTIMATOR_GPS_GLITCH", 1024, "True if the EKF has detected a GPS glitch"),
    ],
    bitmask=True,
)

PositionTargetTypemask = common.enum(
    "POSITION_TARGET_TYPEMASK",
    "Bitmap to indicate which dimensions should be ignored by the vehicle.",
    [
        ("POSITION_TARGET_TYPEMASK_X_IGNORE", 1, "Ignore position x"),
        ("POSITION_TARGET_TYPEMASK_Y_IGNORE", 2, "Ignore position y"),
        ("POSITION_TARGET_TYPEMASK_Z_IGNORE", 4, "Ignore position z"),
        ("POSITION_TARGET_TYPEMASK_VX_IGNORE", 8, "Ignore velocity x"),
        ("POSITION_TARGET_TYPEMASK_VY_IGNORE", 16, "Ignore velocity y"),
        ("POSITION_TARGET_TYPEMASK_VZ_IGNORE", 32, "Ignore velocity z"),
        ("POSITION_TARGET_TYPEMASK_AX_IGNORE", 64, "Ignore acceleration x"),
        ("POSITION_TARGET_TYPEMASK_AY_IGNORE", 128, "Ignore acceleration y"),
        ("POSITION_TARGET_TYPEMASK_AZ_IGNORE", 256, "Ignore acceleration z"),
        ("POSITION_TARGET_TYPEMASK_FORCE_SET", 512, "Use force instead of acceleration"),
        ("POSITION_TARGET_TYPEMASK_YAW_IGNORE", 1024, "Ignore yaw"),
        ("POSITION_TARGET_TYPEMASK_YAW_RATE_IGNORE", 2048, "Ignore yaw rate"),
    ],
    bitmask=True,
)

MavLandedState = common.enum(
    "MAV_LANDED_STATE",
    "Enumeration of landed detector states",
    [
        ("MAV_LANDED_STATE_UNDEFINED", 0, "MAV landed state is unknown"),
        ("MAV_LANDED_STATE_ON_GROUND", 1, "MAV is landed (on ground)"),
        ("MAV_LANDED_STATE_IN_AIR", 2, "MAV is in air"),
        ("MAV_LANDED_STATE_TAKEOFF", 3, "MAV currently taking off"),
        ("MAV_LANDED_STATE_LANDING", 4, "MAV currently landing"),
    ],
)

MavVtolState = common.enum(
    "MAV_VTOL_STATE",
    "Enumeration of VTOL states",
    [
        ("MAV_VTOL_STATE_UNDEFINED", 0, "MAV is not configured as VTOL"),
        ("MAV_VTOL_STATE_TRANSITION_TO_FW", 1, "VTOL is in transition from multicopter to fixed-wing"),
        ("MAV_VTOL_STATE_TRANSITION_TO_MC", 2, "VTOL is in transition from fixed-wing to multicopter"),
        ("MAV_VTOL_STATE_MC", 3, "VTOL is in multicopter state"),
        ("MAV_VTOL_STATE_FW", 4, "VTOL is in fixed-wing state"),
    ],
)

# Traffic

AdsbAltitudeType = common.enum(
    "ADSB_ALTITUDE_TYPE",
    "Enumeration of the ADSB altimeter types",
    [
        ("ADSB_ALTITUDE_TYPE_PRESSURE_QNH", 0, "Altitude reported from a Baro source using QNH reference"),
        ("ADSB_ALTITUDE_TYPE_GEOMETRIC", 1, "Altitude reported from a GNSS source"),
    ],
)

AdsbEmitterType = common.enum(
    "ADSB_EMITTER_TYPE",
    "ADSB classification for the type of vehicle emitting the transponder signal",
    [
        ("ADSB_EMITTER_TYPE_NO_INFO", 0, ""),
        ("ADSB_EMITTER_TYPE_LIGHT", 1, ""),
        ("ADSB_EMITTER_TYPE_SMALL", 2, ""),
        ("ADSB_EMITTER_TYPE_LARGE", 3, ""),
        ("ADSB_EMITTER_TYPE_HIGH_VORTEX_LARGE", 4, ""),
        ("ADSB_EMITTER_TYPE_HEAVY", 5, ""),
        ("ADSB_EMITTER_TYPE_HIGHLY_MANUV", 6, ""),
        ("ADSB_EMITTER_TYPE_ROTOCRAFT", 7, ""),
        ("ADSB_EMITTER_TYPE_UNASSIGNED", 8, ""),
        ("ADSB_EMITTER_TYPE_GLIDER", 9, ""),
        ("ADSB_EMITTER_TYPE_LIGHTER_AIR", 10, ""),
        ("ADSB_EMITTER_TYPE_PARACHUTE", 11, ""),
        ("ADSB_EMITTER_TYPE_ULTRA_LIGHT", 12, ""),
        ("ADSB_EMITTER_TYPE_UNASSIGNED2", 13, ""),
        ("ADSB_EMITTER_TYPE_UAV", 14, ""),
        ("ADSB_EMITTER_TYPE_SPACE", 15, ""),
        ("ADSB_EMITTER_TYPE_UNASSGINED3", 16, ""),
        ("ADSB_EMITTER_TYPE_EMERGENCY_SURFACE", 17, ""),
        ("ADSB_EMITTER_TYPE_SERVICE_SURFACE", 18, ""),
        ("ADSB_EMITTER_TYPE_POINT_OBSTACLE", 19, ""),
    ],
)

AdsbFlags = common.enum(
    "ADSB_FLAGS",
    "These flags indicate status such as data validity of each data source. Set = data valid",
    [
        ("ADSB_FLAGS_VALID_COORDS", 1, ""),
        ("ADSB_FLAGS_VALID_ALTITUDE", 2, ""),
        ("ADSB_FLAGS_VALID_HEADING", 4, ""),
        ("ADSB_FLAGS_VALID_VELOCITY", 8, ""),
        ("ADSB_FLAGS_VALID_CALLSIGN", 16, ""),
        ("ADSB_FLAGS_VALID_SQUAWK", 32, ""),
        ("ADSB_FLAGS_SIMULATED", 64, ""),
    ],
    bitmask=True,
)

MavCollisionSrc = common.enum(
    "MAV_COLLISION_SRC",
    "Source of information about this collision.",
    [
        ("MAV_COLLISION_SRC_ADSB", 0, "ID field references ADSB_VEHICLE packets"),
        ("MAV_COLLISION_SRC_MAVLINK_GPS_GLOBAL_INT", 1, "ID field references MAVLink SRC ID"),
    ],
)

MavCollisionAction = common.enum(
    "MAV_COLLISION_ACTION",
    "Possible actions an aircraft can take to avoid a collision.",
    [
        ("MAV_COLLISION_ACTION_NONE", 0, "Ignore any potential collisions"),
        ("MAV_COLLISION_ACTION_REPORT", 1, "Report potential collision"),
        ("MAV_COLLISION_ACTION_ASCEND_OR_DESCEND", 2, "Ascend or Descend to avoid threat"),
        ("MAV_COLLISION_ACTION_MOVE_HORIZONTALLY", 3, "Move horizontally to avoid threat"),
        ("MAV_COLLISION_ACTION_MOVE_PERPENDICULAR", 4, "Aircraft to move perpendicular to the collision's velocity vector"),
        ("MAV_COLLISION_ACTION_RTL", 5, "Aircraft to fly directly back to its launch point"),
        ("MAV_COLLISION_ACTION_HOVER", 6, "Aircraft to stop in place"),
    ],
)

MavCollisionThreatLevel = common.enum(
    "MAV_COLLISION_THREAT_LEVEL",
    "Aircraft-rated danger from this threat.",
    [
        ("MAV_COLLISION_THREAT_LEVEL_NONE", 0, "Not a threat"),
        ("MAV_COLLISION_THREAT_LEVEL_LOW", 1, "Craft is mildly concerned about this threat"),
        ("MAV_COLLISION_THREAT_LEVEL_HIGH", 2, "Craft is panicking, and may take actions to avoid threat"),
    ],
)
