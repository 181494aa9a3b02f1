# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: command_request.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n\x15\x63ommand_request.proto\x12\x0f\x63ommand_request\"M\n\x0bSlotIdRoute\x12-\n\tslot_type\x18\x01 \x01(\x0e\x32\x1a.command_request.SlotTypes\x12\x0f\n\x07slot_id\x18\x02 \x01(\x05\"O\n\x0cSlotKeyRoute\x12-\n\tslot_type\x18\x01 \x01(\x0e\x32\x1a.command_request.SlotTypes\x12\x10\n\x08slot_key\x18\x02 \x01(\t\",\n\x0e\x42yAddressRoute\x12\x0c\n\x04host\x18\x01 \x01(\t\x12\x0c\n\x04port\x18\x02 \x01(\x05\"\xf6\x01\n\x06Routes\x12\x36\n\rsimple_routes\x18\x01 \x01(\x0e\x32\x1d.command_request.SimpleRoutesH\x00\x12\x37\n\x0eslot_key_route\x18\x02 \x01(\x0b\x32\x1d.command_request.SlotKeyRouteH\x00\x12\x35\n\rslot_id_route\x18\x03 \x01(\x0b\x32\x1c.command_request.SlotIdRouteH\x00\x12;\n\x10\x62y_address_route\x18\x04 \x01(\x0b\x32\x1f.command_request.ByAddressRouteH\x00\x42\x07\n\x05value\"\xb6\x01\n\x07\x43ommand\x12\x32\n\x0crequest_type\x18\x01 \x01(\x0e\x32\x1c.command_request.RequestType\x12\x38\n\nargs_array\x18\x02 \x01(\x0b\x32\".command_request.Command.ArgsArrayH\x00\x12\x1a\n\x10\x61rgs_vec_pointer\x18\x03 \x01(\x04H\x00\x1a\x19\n\tArgsArray\x12\x0c\n\x04\x61rgs\x18\x01 \x03(\x0c\x42\x06\n\x04\x61rgs\"\x80\x01\n\x18ScriptInvocationPointers\x12\x0c\n\x04hash\x18\x01 \x01(\t\x12\x19\n\x0ckeys_pointer\x18\x02 \x01(\x04H\x00\x88\x01\x01\x12\x19\n\x0c\x61rgs_pointer\x18\x03 \x01(\x04H\x01\x88\x01\x01\x42\x0f\n\r_keys_pointerB\x0f\n\r_args_pointer\"<\n\x10ScriptInvocation\x12\x0c\n\x04hash\x18\x01 \x01(\t\x12\x0c\n\x04keys\x18\x02 \x03(\x0c\x12\x0c\n\x04\x61rgs\x18\x03 \x03(\x0c\"9\n\x0bTransaction\x12*\n\x08\x63ommands\x18\x01 \x03(\x0b\x32\x18.command_request.Command\"\x93\x01\n\x0b\x43lusterScan\x12\x0e\n\x06\x63ursor\x18\x01 \x01(\t\x12\x1a\n\rmatch_pattern\x18\x02 \x01(\x0cH\x00\x88\x01\x01\x12\x12\n\x05\x63ount\x18\x03 \x01(\x03H\x01\x88\x01\x01\x12\x18\n\x0bobject_type\x18\x04 \x01(\tH\x02\x88\x01\x01\x42\x10\n\x0e_match_patternB\x08\n\x06_countB\x0e\n\x0c_object_type\"V\n\x18UpdateConnectionPassword\x12\x15\n\x08password\x18\x01 \x01(\tH\x00\x88\x01\x01\x12\x16\n\x0eimmediate_auth\x18\x02 \x01(\x08\x42\x0b\n\t_password\"\xda\x03\n\x0e\x43ommandRequest\x12\x14\n\x0c\x63\x61llback_idx\x18\x01 \x01(\r\x12\x32\n\x0esingle_command\x18\x02 \x01(\x0b\x32\x18.command_request.CommandH\x00\x12\x33\n\x0btransaction\x18\x03 \x01(\x0b\x32\x1c.command_request.TransactionH\x00\x12>\n\x11script_invocation\x18\x04 \x01(\x0b\x32!.command_request.ScriptInvocationH\x00\x12O\n\x1ascript_invocation_pointers\x18\x05 \x01(\x0b\x32).command_request.ScriptInvocationPointersH\x00\x12\x34\n\x0c\x63luster_scan\x18\x06 \x01(\x0b\x32\x1c.command_request.ClusterScanH\x00\x12O\n\x1aupdate_connection_password\x18\x07 \x01(\x0b\x32).command_request.UpdateConnectionPasswordH\x00\x12&\n\x05route\x18\x08 \x01(\x0b\x32\x17.command_request.RoutesB\t\n\x07\x63ommand*:\n\x0cSimpleRoutes\x12\x0c\n\x08\x41llNodes\x10\x00\x12\x10\n\x0c\x41llPrimaries\x10\x01\x12\n\n\x06Random\x10\x02*%\n\tSlotTypes\x12\x0b\n\x07Primary\x10\x00\x12\x0b\n\x07Replica\x10\x01*\xa7\x08\n\x0bRequestType\x12\x12\n\x0eInvalidRequest\x10\x00\x12\x11\n\rCustomCommand\x10\x01\x12\x07\n\x03Get\x10\x02\x12\x07\n\x03Set\x10\x03\x12\x08\n\x04Ping\x10\x04\x12\x08\n\x04Info\x10\x05\x12\x07\n\x03\x44\x65l\x10\x06\x12\n\n\x06Select\x10\x07\x12\r\n\tConfigGet\x10\x08\x12\r\n\tConfigSet\x10\t\x12\x13\n\x0f\x43onfigResetStat\x10\n\x12\x11\n\rConfigRewrite\x10\x0b\x12\x11\n\rClientGetName\x10\x0c\x12\x12\n\x0e\x43lientGetRedir\x10\r\x12\x0c\n\x08\x43lientId\x10\x0e\x12\x0e\n\nClientInfo\x10\x0f\x12\x0e\n\nClientKill\x10\x10\x12\x0e\n\nClientList\x10\x11\x12\x11\n\rClientNoEvict\x10\x12\x12\x11\n\rClientNoTouch\x10\x13\x12\x0f\n\x0b\x43lientPause\x10\x14\x12\x0f\n\x0b\x43lientReply\x10\x15\x12\x11\n\rClientSetInfo\x10\x16\x12\x11\n\rClientSetName\x10\x17\x12\x11\n\rClientUnblock\x10\x18\x12\x11\n\rClientUnpause\x10\x19\x12\n\n\x06\x45xpire\x10\x1a\x12\x0b\n\x07HashSet\x10\x1b\x12\x0b\n\x07HashGet\x10\x1c\x12\x0b\n\x07HashDel\x10\x1d\x12\x0e\n\nHashExists\x10\x1e\x12\x08\n\x04MGet\x10\x1f\x12\x08\n\x04MSet\x10 \x12\x08\n\x04Incr\x10!\x12\n\n\x06IncrBy\x10\"\x12\x08\n\x04\x44\x65\x63r\x10#\x12\x0f\n\x0bIncrByFloat\x10$\x12\n\n\x06\x44\x65\x63rBy\x10%\x12\x0e\n\nHashGetAll\x10&\x12\x0c\n\x08HashMSet\x10\'\x12\x0c\n\x08HashMGet\x10(\x12\x0e\n\nHashIncrBy\x10)\x12\x13\n\x0fHashIncrByFloat\x10*\x12\t\n\x05LPush\x10+\x12\x08\n\x04LPop\x10,\x12\t\n\x05RPush\x10-\x12\x08\n\x04RPop\x10.\x12\x08\n\x04LLen\x10/\x12\x08\n\x04LRem\x10\x30\x12\n\n\x06LRange\x10\x31\x12\t\n\x05LTrim\x10\x32\x12\x08\n\x04SAdd\x10\x33\x12\x08\n\x04SRem\x10\x34\x12\x0c\n\x08SMembers\x10\x35\x12\t\n\x05SCard\x10\x36\x12\r\n\tPExpireAt\x10\x37\x12\x0b\n\x07PExpire\x10\x38\x12\x0c\n\x08\x45xpireAt\x10\x39\x12\n\n\x06\x45xists\x10:\x12\n\n\x06Unlink\x10;\x12\x07\n\x03TTL\x10<\x12\x08\n\x04Zadd\x10=\x12\x08\n\x04Zrem\x10>\x12\n\n\x06Zrange\x10?\x12\t\n\x05Zcard\x10@\x12\n\n\x06Zcount\x10\x41\x12\x0b\n\x07ZIncrBy\x10\x42\x12\n\n\x06ZScore\x10\x43\x12\x08\n\x04Type\x10\x44\x12\x08\n\x04HLen\x10\x45\x12\x08\n\x04\x45\x63ho\x10\x46\x12\x0b\n\x07Publish\x10G\x12\r\n\tSubscribe\x10H\x12\x0f\n\x0bUnsubscribe\x10I\x12\x0e\n\nPSubscribe\x10J\x12\x10\n\x0cPUnsubscribe\x10K\x12\x08\n\x04Scan\x10Lb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'command_request_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _SIMPLEROUTES._serialized_start=1649
  _SIMPLEROUTES._serialized_end=1707
  _SLOTTYPES._serialized_start=1709
  _SLOTTYPES._serialized_end=1746
  _REQUESTTYPE._serialized_start=1749
  _REQUESTTYPE._serialized_end=2812
  _SLOTIDROUTE._serialized_start=42
  _SLOTIDROUTE._serialized_end=119
  _SLOTKEYROUTE._serialized_start=121
  _SLOTKEYROUTE._serialized_end=200
  _BYADDRESSROUTE._serialized_start=202
  _BYADDRESSROUTE._serialized_end=246
  _ROUTES._serialized_start=249
  _ROUTES._serialized_end=495
  _COMMAND._serialized_start=498
  _COMMAND._serialized_end=680
  _COMMAND_ARGSARRAY._serialized_start=647
  _COMMAND_ARGSARRAY._serialized_end=672
  _SCRIPTINVOCATIONPOINTERS._serialized_start=683
  _SCRIPTINVOCATIONPOINTERS._serialized_end=811
  _SCRIPTINVOCATION._serialized_start=813
  _SCRIPTINVOCATION._serialized_end=873
  _TRANSACTION._serialized_start=875
  _TRANSACTION._serialized_end=932
  _CLUSTERSCAN._serialized_start=935
  _CLUSTERSCAN._serialized_end=1082
  _UPDATECONNECTIONPASSWORD._serialized_start=1084
  _UPDATECONNECTIONPASSWORD._serialized_end=1170
  _COMMANDREQUEST._serialized_start=1173
  _COMMANDREQUEST._serialized_end=1647
# @@protoc_insertion_point(module_scope)
