"""Attribute names, attribute values, service ports and site job attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto

__all__ = [
    "ServicePorts",
    "SiteJobAttribute",
    "AttributeAccess",
    "AttributeType",
    "ParentType",
    "default_ports",
    "site_job_attributes",
]

# Attribute names used by user commands
ATTR_a = "Execution_Time"
ATTR_c = "Checkpoint"
ATTR_e = "Error_Path"
ATTR_f = "fault_tolerant"
ATTR_g = "group_list"
ATTR_h = "Hold_Types"
ATTR_j = "Join_Path"
ATTR_k = "Keep_Files"
ATTR_l = "Resource_List"
ATTR_m = "Mail_Points"
ATTR_o = "Output_Path"
ATTR_p = "Priority"
ATTR_q = "destination"
ATTR_r = "Rerunable"
ATTR_t = "job_array_request"
ATTR_array_id = "job_array_id"
ATTR_u = "User_List"
ATTR_v = "Variable_List"
ATTR_A = "Account_Name"
ATTR_M = "Mail_Users"
ATTR_N = "Job_Name"
ATTR_S = "Shell_Path_List"
ATTR_depend = "depend"
ATTR_inter = "interactive"
ATTR_stagein = "stagein"
ATTR_stageout = "stageout"
ATTR_jobtype = "jobtype"

# Additional job and general attribute names
ATTR_ctime = "ctime"
ATTR_exechost = "exec_host"
ATTR_mtime = "mtime"
ATTR_qtime = "qtime"
ATTR_planned_start = "planned_start"
ATTR_planned_nodes = "planned_nodes"
ATTR_waiting_for = "waiting_for_jobs"
ATTR_session = "session_id"
ATTR_euser = "euser"
ATTR_egroup = "egroup"
ATTR_hashname = "hashname"
ATTR_hopcount = "hop_count"
ATTR_security = "security"
ATTR_sched_hint = "sched_hint"
ATTR_substate = "substate"
ATTR_name = "Job_Name"
ATTR_owner = "Job_Owner"
ATTR_used = "resources_used"
ATTR_state = "job_state"
ATTR_queue = "queue"
ATTR_server = "server"
ATTR_maxrun = "max_running"
ATTR_maxreport = "max_report"
ATTR_total = "total_jobs"
ATTR_comment = "comment"
ATTR_cookie = "cookie"
ATTR_qrank = "queue_rank"
ATTR_altid = "alt_id"
ATTR_etime = "etime"
ATTR_exitstat = "exit_status"
ATTR_forwardx11 = "forward_x11"
ATTR_submit_args = "submit_args"
ATTR_tokens = "tokens"
ATTR_netcounter = "net_counter"
ATTR_umask = "umask"
ATTR_start_time = "start_time"
ATTR_start_count = "start_count"
ATTR_checkpoint_dir = "checkpoint_dir"
ATTR_checkpoint_name = "checkpoint_name"
ATTR_checkpoint_time = "checkpoint_time"
ATTR_checkpoint_restart_status = "checkpoint_restart_status"
ATTR_restart_name = "restart_name"
ATTR_comp_time = "comp_time"
ATTR_reported = "reported"
ATTR_intcmd = "inter_cmd"
ATTR_P = "proxy_user"
ATTR_cloudmap = "cloudmap"
ATTR_schedspec = "sched_nodespec"
ATTR_total_resources = "resc_req_total"
ATTR_vlanid = "vlan_id"
ATTR_fairshare_cost = "fairshare_cost"
ATTR_interactive_submit = "interactive_submit"
ATTR_cgroup = "cgroup"

# Queue attribute names
ATTR_aclgren = "acl_group_enable"
ATTR_aclgroup = "acl_groups"
ATTR_aclhten = "acl_host_enable"
ATTR_aclhost = "acl_hosts"
ATTR_acluren = "acl_user_enable"
ATTR_acluser = "acl_users"
ATTR_altrouter = "alt_router"
ATTR_checkpoint_min = "checkpoint_min"
ATTR_enable = "enabled"
ATTR_fromroute = "from_route_only"
ATTR_hostlist = "hostlist"
ATTR_killdelay = "kill_delay"
ATTR_maxgrprun = "max_group_run"
ATTR_maxque = "max_queuable"
ATTR_maxuserque = "max_user_queuable"
ATTR_maxuserrun = "max_user_run"
ATTR_qtype = "queue_type"
ATTR_rescassn = "resources_assigned"
ATTR_rescdflt = "resources_default"
ATTR_rescmax = "resources_max"
ATTR_rescmin = "resources_min"
ATTR_rerunnable = "restartable"
ATTR_rndzretry = "rendezvous_retry"
ATTR_routedest = "route_destinations"
ATTR_routeheld = "route_held_jobs"
ATTR_routewait = "route_waiting_jobs"
ATTR_routeretry = "route_retry_time"
ATTR_routelife = "route_lifetime"
ATTR_required_property = "required_property"
ATTR_description_en = "description_en"
ATTR_description_cs = "description_cs"
ATTR_rsvexpdt = "reserved_expedite"
ATTR_rsvsync = "reserved_sync"
ATTR_start = "started"
ATTR_count = "state_count"
ATTR_number = "number_jobs"
ATTR_acllogic = "acl_logic_or"
ATTR_aclgrpslpy = "acl_group_sloppy"
ATTR_keepcompleted = "keep_completed"
ATTR_disallowedtypes = "disallowed_types"
ATTR_is_transit = "is_transit"
ATTR_starving_support = "jobs_starving_after"
ATTR_admin_queue = "admin_queue"
ATTR_queue_purpose = "queue_purpose"
ATTR_fairshare_tree = "fairshare_tree"
ATTR_maxuserproc = "max_user_proc"
ATTR_maxgrpproc = "max_group_proc"
ATTR_maxproc = "max_proc"
ATTR_fairshare_coef = "fairshare_coef"

# Server attribute names
ATTR_aclroot = "acl_roots"
ATTR_managers = "managers"
ATTR_dfltque = "default_queue"
ATTR_dispsvrsuffix = "display_job_server_suffix"
ATTR_jobsuffixalias = "job_suffix_alias"
ATTR_defnode = "default_node"
ATTR_locsvrs = "location_servers"
ATTR_logevents = "log_events"
ATTR_logfile = "log_file"
ATTR_loglevel = "log_level"
ATTR_mailfrom = "mail_from"
ATTR_nodepack = "node_pack"
ATTR_nodesuffix = "node_suffix"
ATTR_operators = "operators"
ATTR_queryother = "query_other_jobs"
ATTR_resccost = "resources_cost"
ATTR_rescavail = "resources_available"
ATTR_schedit = "scheduler_iteration"
ATTR_scheduling = "scheduling"
ATTR_status = "server_state"
ATTR_syscost = "system_cost"
ATTR_pingrate = "node_ping_rate"
ATTR_ndchkrate = "node_check_rate"
ATTR_tcptimeout = "tcp_timeout"
ATTR_jobstatrate = "job_stat_rate"
ATTR_polljobs = "poll_jobs"
ATTR_downonerror = "down_on_error"
ATTR_disableserveridcheck = "disable_server_id_check"
ATTR_jobnanny = "job_nanny"
ATTR_ownerpurge = "owner_purge"
ATTR_qcqlimits = "queue_centric_limits"
ATTR_momjobsync = "mom_job_sync"
ATTR_maildomain = "mail_domain"
ATTR_pbsversion = "pbs_version"
ATTR_submithosts = "submit_hosts"
ATTR_allownodesubmit = "allow_node_submit"
ATTR_allowproxyuser = "allow_proxy_user"
ATTR_autonodenp = "auto_node_np"
ATTR_servername = "server_name"
ATTR_logfilemaxsize = "log_file_max_size"
ATTR_logfilerolldepth = "log_file_roll_depth"
ATTR_logkeepdays = "log_keep_days"
ATTR_nextjobnum = "next_job_number"
ATTR_extraresc = "extra_resc"
ATTR_schedversion = "sched_version"
ATTR_acctkeepdays = "accounting_keep_days"
ATTR_lockfile = "lock_file"
ATTR_credentiallifetime = "credential_lifetime"
ATTR_jobmustreport = "job_must_report"
ATTR_LockfileUpdateTime = "lock_file_update_time"
ATTR_LockfileCheckTime = "lock_file_check_time"
ATTR_npdefault = "np_default"
ATTR_jobstarttimeout = "job_start_timeout"
ATTR_jobforcecanceltime = "job_force_cancel_time"
ATTR_MaxInstallingNodes = "max_installing_nodes"
ATTR_ResourcesToStore = "node_resources_to_store"
ATTR_ResourcesMappings = "node_resources_mappings"
ATTR_krb_realm_submit_acl = "krb_realm_submit_acl"
ATTR_acl_krb_realm_enable = "acl_krb_realm_enable"
ATTR_acl_krb_realms = "acl_krb_realms"
ATTR_lbserver = "lb_server"

# Node attribute names
ATTR_NODE_state = "state"
ATTR_NODE_np = "np"
ATTR_NODE_npfree = "npfree"
ATTR_NODE_npshared = "npshared"
ATTR_NODE_properties = "properties"
ATTR_NODE_adproperties = "additional_properties"
ATTR_NODE_ntype = "ntype"
ATTR_NODE_jobs = "jobs"
ATTR_NODE_status = "status"
ATTR_NODE_note = "note"
ATTR_NODE_no_multinode_jobs = "no_multinode_jobs"
ATTR_NODE_exclusively_assigned = "exclusively_assigned"
ATTR_NODE_resources_total = "resources_total"
ATTR_NODE_resources_used = "resources_used"
ATTR_NODE_queue = "queue"
ATTR_NODE_cloud = "cloud"
ATTR_NODE_noautoresv = "no_starving_jobs"
ATTR_NODE_available_before = "available_before"
ATTR_NODE_available_after = "available_after"
ATTR_NODE_priority = "node_priority"
ATTR_NODE_machine_spec = "machine_spec"
ATTR_NODE_admin_slot_enabled = "admin_slot_enabled"
ATTR_NODE_admin_slot_available = "admin_slot_available"
ATTR_NODE_fairshare_coef = "fairshare_coef"

# Notification mail formatting
ATTR_mailsubjectfmt = "mail_subject_fmt"
ATTR_mailbodyfmt = "mail_body_fmt"

# Request extensions
DELDELAY = "deldelay="
DELPURGE = "delpurge="
PURGECOMP = "purgecomplete="
EXECQUEONLY = "exec_queue_only"
RERUNFORCE = "force"

# Node states and types
ND_free = "free"
ND_offline = "offline"
ND_down = "down"
ND_reserve = "reserve"
ND_job_exclusive = "job-exclusive"
ND_job_sharing = "job-sharing"
ND_busy = "busy"
ND_frozen = "frozen"
ND_state_unknown = "state-unknown"
ND_timeshared = "time-shared"
ND_cluster = "cluster"
ND_virtual = "virtual"
ND_cloud = "cloud"

# Queue disallowed job types
Q_DT_batch = "batch"
Q_DT_interactive = "interactive"
Q_DT_rerunable = "rerunable"
Q_DT_nonrerunable = "nonrerunable"
Q_DT_fault_tolerant = "fault_tolerant"
Q_DT_fault_intolerant = "fault_intolerant"
Q_DT_job_array = "job_array"

# Checkpoint related values
CHECKPOINTHOLD = "checkpoint_hold"
CHECKPOINTCONT = "checkpoint_cont"
MOM_DEFAULT_CHECKPOINT_DIR = "$MOMDEFAULTCHECKPOINTDIR$"


@dataclass(frozen=True)
class ServicePorts:
    """Service names and default ports of the batch daemons."""

    batch_name: str
    batch_port: int
    batch_dis_name: str
    batch_dis_port: int
    mom_name: str
    mom_port: int
    manager_name: str
    manager_port: int
    scheduler_name: str
    scheduler_port: int


_TORQUE_PORTS = ServicePorts(
    batch_name="torque",
    batch_port=15051,
    batch_dis_name="torque_dis",
    batch_dis_port=15051,
    mom_name="torque_mom",
    mom_port=15052,
    manager_name="torque_resmon",
    manager_port=15053,
    scheduler_name="torque_sched",
    scheduler_port=15054,
)

_PBS_PORTS = ServicePorts(
    batch_name="pbs",
    batch_port=15001,
    batch_dis_name="pbs_dis",
    batch_dis_port=15001,
    mom_name="pbs_mom",
    mom_port=15002,
    manager_name="pbs_resmon",
    manager_port=15003,
    scheduler_name="pbs_sched",
    scheduler_port=15004,
)


def default_ports(torque_ports: bool = True) -> ServicePorts:
    """Return the default service names and ports.

    With *torque_ports* the ``torque`` family of names and ports is used,
    otherwise the classic ``pbs`` one.
    """
    return _TORQUE_PORTS if torque_ports else _PBS_PORTS


class AttributeAccess(Flag):
    """Who may read or write an attribute."""

    READ_WRITE = auto()
    MOM = auto()
    SERVER_READ = auto()
    SERVER_WRITE = auto()


class AttributeType(Enum):
    """How an attribute value is stored."""

    STRING = "string"


class ParentType(Enum):
    """Kind of object an attribute belongs to."""

    JOB = "job"


@dataclass(frozen=True)
class SiteJobAttribute:
    """A site-defined job attribute and its position in the site list."""

    index: int
    name: str
    access: AttributeAccess
    type: AttributeType = AttributeType.STRING
    parent: ParentType = ParentType.JOB

    def allows(self, access: AttributeAccess) -> bool:
        """Return True if every permission in *access* is granted."""
        return (self.access & access) == access


_SITE_JOB_ATTRIBUTES = (
    SiteJobAttribute(0, "x", AttributeAccess.READ_WRITE),
    SiteJobAttribute(
        1,
        "krb_princ",
        AttributeAccess.READ_WRITE
        | AttributeAccess.MOM
        | AttributeAccess.SERVER_READ
        | AttributeAccess.SERVER_WRITE,
    ),
)


def site_job_attributes() -> tuple[SiteJobAttribute, ...]:
    """Return the site job attributes in the order they are defined."""
    return _SITE_JOB_ATTRIBUTES