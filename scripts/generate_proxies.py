#!/usr/bin/env python3
'''
This program generates nmdbus/raw/generated.py, the declarations of the
NetworkManager D-Bus interfaces used by this library.

It reads the introspection XML files shipped by NetworkManager
(usually /usr/share/dbus-1/interfaces) or dumped with:

    busctl --system introspect --xml-interface \
        org.freedesktop.NetworkManager /org/freedesktop/NetworkManager
'''
import argparse
import os
import xml.etree.ElementTree as ElementTree

# The root of this repo
ROOT = os.path.dirname(
    os.path.dirname(os.path.realpath(__file__))
)

OUTPUT = os.path.join(ROOT, "nmdbus", "raw", "generated.py")  # Path of the generated module.
DEFAULT_INTERFACES_DIR = "/usr/share/dbus-1/interfaces"
DESTINATION = "org.freedesktop.NetworkManager"

# Interface name -> name of the generated class.
INTERFACES = {
    "org.freedesktop.NetworkManager": "NetworkManagerProxy",
    "org.freedesktop.NetworkManager.Settings": "SettingsProxy",
    "org.freedesktop.NetworkManager.Settings.Connection": "SettingsConnectionProxy",
    "org.freedesktop.NetworkManager.Device": "DeviceProxy",
    "org.freedesktop.NetworkManager.Device.Wireless": "DeviceWirelessProxy",
    "org.freedesktop.NetworkManager.Device.Wired": "DeviceWiredProxy",
    "org.freedesktop.NetworkManager.Device.Generic": "DeviceGenericProxy",
    "org.freedesktop.NetworkManager.Device.Bridge": "DeviceBridgeProxy",
    "org.freedesktop.NetworkManager.Device.Veth": "DeviceVethProxy",
    "org.freedesktop.NetworkManager.AccessPoint": "AccessPointProxy",
    "org.freedesktop.NetworkManager.IP4Config": "IP4ConfigProxy",
    "org.freedesktop.NetworkManager.DHCP4Config": "DHCP4ConfigProxy",
    "org.freedesktop.NetworkManager.DHCP6Config": "DHCP6ConfigProxy",
}

HEADER = '''"""
Declarations of the NetworkManager D-Bus interfaces.

This file was generated by scripts/generate_proxies.py from the
NetworkManager introspection data. Do not edit manually.
"""
from nmdbus.raw.base import RemoteInterface, RemoteMethod, RemoteProperty

DESTINATION = "{destination}"
'''

CLASS_TEMPLATE = '''

class {class_name}(RemoteInterface):
    """{interface_name}"""
    interface_name = "{interface_name}"
    default_destination = DESTINATION
'''


def parse_interfaces(paths):
    """Returns the interface elements found in the given XML files, by name."""
    interfaces = {}
    for path in paths:
        tree = ElementTree.parse(path)
        for interface in tree.iter("interface"):
            interfaces[interface.get("name")] = interface

    return interfaces


def render_interface(class_name, interface):
    lines = [
        CLASS_TEMPLATE.format(class_name=class_name, interface_name=interface.get("name")).rstrip("\n")
    ]

    methods = sorted(interface.findall("method"), key=lambda method: method.get("name"))
    if methods:
        lines.append("")
    for method in methods:
        in_signature = "".join(
            arg.get("type") for arg in method.findall("arg") if arg.get("direction", "in") == "in"
        )
        out_signature = "".join(
            arg.get("type") for arg in method.findall("arg") if arg.get("direction") == "out"
        )
        lines.append(
            f'    {method.get("name")} = RemoteMethod("{in_signature}", "{out_signature}")'
        )

    properties = sorted(interface.findall("property"), key=lambda prop: prop.get("name"))
    if properties:
        lines.append("")
    for prop in properties:
        if prop.get("access") == "readwrite":
            lines.append(f'    {prop.get("name")} = RemoteProperty("{prop.get("type")}", writable=True)')
        else:
            lines.append(f'    {prop.get("name")} = RemoteProperty("{prop.get("type")}")')

    return "\n".join(lines) + "\n"


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "xml_files", nargs="*",
        help="introspection files (defaults to the ones in %s)" % DEFAULT_INTERFACES_DIR
    )
    parser.add_argument("--output", default=OUTPUT)
    args = parser.parse_args()

    xml_files = args.xml_files or [
        os.path.join(DEFAULT_INTERFACES_DIR, f"{name}.xml") for name in INTERFACES
    ]
    interfaces = parse_interfaces(xml_files)

    missing = set(INTERFACES) - set(interfaces)
    if missing:
        raise SystemExit("Missing introspection data for: " + ", ".join(sorted(missing)))

    with open(args.output, "w", encoding="utf-8") as output:
        output.write(HEADER.format(destination=DESTINATION))
        for interface_name, class_name in INTERFACES.items():
            output.write(render_interface(class_name, interfaces[interface_name]))


if __name__ == "__main__":
    main()
