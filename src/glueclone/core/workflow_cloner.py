"""WorkflowCloner: Rebuild an AWS Glue Workflow (and its trigger graph) under new names"""

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from botocore.client import BaseClient

# GlueClone Imports
from glueclone.utils.name_replacer import NameReplacer


class WorkflowCloneError(Exception):
    """Exception raised when a clone is refused before any remote change is made."""


class CloneNaming(ABC):
    """CloneNaming: Decides every name that ends up in the cloned workflow"""

    def __init__(self, replacer: NameReplacer = None):
        self.replacer = replacer or NameReplacer()

    @abstractmethod
    def workflow_name(self, name: str) -> str:
        pass

    @abstractmethod
    def trigger_name(self, name: str) -> str:
        pass

    def job_name(self, name: str) -> str:
        return self.replacer.replace(name)

    def crawler_name(self, name: str) -> str:
        return self.replacer.replace(name)

    def node_name(self, node: dict) -> str:
        """Name for a graph node, based on the node type"""
        node_type = node.get("Type")
        if node_type == "TRIGGER":
            return self.trigger_name(node["Name"])
        if node_type == "CRAWLER":
            return self.crawler_name(node["Name"])
        return self.job_name(node["Name"])


class RegionNaming(CloneNaming):
    """RegionNaming: Every name goes through the replacer"""

    def workflow_name(self, name: str) -> str:
        return self.replacer.replace(name)

    def trigger_name(self, name: str) -> str:
        return self.replacer.replace(name)


class PrefixNaming(CloneNaming):
    """PrefixNaming: Workflow and trigger names get the prefix, jobs and crawlers go through the replacer"""

    def __init__(self, prefix: str, replacer: NameReplacer = None):
        super().__init__(replacer)
        self.prefix = prefix

    def workflow_name(self, name: str) -> str:
        return self.prefix + name

    # Trigger names are unique per account and region
    def trigger_name(self, name: str) -> str:
        return self.prefix + name


@dataclass
class CloneResult:
    """CloneResult: Summary of a finished clone"""

    source_name: str
    workflow_name: str
    deleted_existing: bool = False
    nodes: List[str] = field(default_factory=list)
    triggers: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [f"Workflow: {self.source_name} -> {self.workflow_name}"]
        if self.deleted_existing:
            lines.append(f"  Replaced existing workflow: {self.workflow_name}")
        lines.extend(f"  Trigger: {name}" for name in self.triggers)
        return "\n".join(lines)


def graph_nodes(workflow: dict) -> list:
    """Nodes of a GetWorkflow(IncludeGraph=True) response (empty workflows have no graph)"""
    return (workflow.get("Graph") or {}).get("Nodes") or []


def node_trigger(node: dict) -> dict:
    """The trigger definition of a graph node (None for job and crawler nodes)"""
    return (node.get("TriggerDetails") or {}).get("Trigger")


class WorkflowCloner:
    """WorkflowCloner: Copy a Glue Workflow, its triggers and their job/crawler references

    Common Usage:
        ```python
        source_glue = boto3.client("glue", region_name="eu-west-1")
        target_glue = boto3.client("glue", region_name="us-east-1")
        cloner = WorkflowCloner(source_glue, target_glue, RegionNaming(NameReplacer({"eu": "us"})))
        result = cloner.clone("eu_nightly_etl")
        ```

    Remote errors (botocore ClientError) are not caught: the first failure
    aborts the clone and whatever was already created stays in place.
    """

    def __init__(self, source_glue: BaseClient, target_glue: BaseClient, naming: CloneNaming):
        """WorkflowCloner Initialization

        Args:
            source_glue (BaseClient): Glue client where the original workflow lives
            target_glue (BaseClient): Glue client where the clone is created (can be the same client)
            naming (CloneNaming): Strategy for the names in the clone
        """
        self.log = logging.getLogger("glueclone")
        self.source_glue = source_glue
        self.target_glue = target_glue
        self.naming = naming

    def list_workflows(self) -> List[str]:
        """List all the workflow names in the target (follows NextToken pagination)"""
        workflows = []
        kwargs = {}
        while True:
            response = self.target_glue.list_workflows(**kwargs)
            workflows.extend(response.get("Workflows", []))
            next_token = response.get("NextToken")
            if not next_token:
                return workflows
            kwargs["NextToken"] = next_token

    @staticmethod
    def get_workflow(glue_client: BaseClient, name: str) -> dict:
        """Get a workflow, including its graph of nodes and edges"""
        return glue_client.get_workflow(Name=name, IncludeGraph=True)["Workflow"]

    def delete_workflow(self, name: str):
        """Delete a target workflow, removing its triggers first

        Args:
            name (str): The name of the workflow in the target
        """
        workflow = self.get_workflow(self.target_glue, name)
        for node in graph_nodes(workflow):
            trigger = node_trigger(node)
            if trigger:
                self.log.info(f"Deleting trigger {trigger['Name']}...")
                self.target_glue.delete_trigger(Name=trigger["Name"])
        self.log.important(f"Deleting workflow {name}...")
        self.target_glue.delete_workflow(Name=name)

    def create_workflow(self, name: str, source_workflow: dict):
        """Create the target workflow with the run properties of the source workflow"""
        params = {"Name": name}
        for key in ["Description", "DefaultRunProperties", "MaxConcurrentRuns"]:
            if source_workflow.get(key) is not None:
                params[key] = copy.deepcopy(source_workflow[key])
        self.log.important(f"Creating workflow {name}...")
        self.target_glue.create_workflow(**params)

    def rewrite_reference(self, entry: dict) -> dict:
        """Copy of an action or predicate condition with its job/crawler names rewritten"""
        entry = copy.deepcopy(entry)
        if entry.get("JobName") is not None:
            entry["JobName"] = self.naming.job_name(entry["JobName"])
        if entry.get("CrawlerName") is not None:
            entry["CrawlerName"] = self.naming.crawler_name(entry["CrawlerName"])
        return entry

    def clone_trigger(self, trigger: dict, workflow_name: str) -> dict:
        """Build the CreateTrigger request for the clone of a trigger

        Args:
            trigger (dict): The trigger definition from the source workflow graph
            workflow_name (str): The name of the cloned workflow

        Returns:
            dict: Keyword arguments for glue.create_trigger()
        """
        request = {
            "Name": self.naming.trigger_name(trigger["Name"]),
            "WorkflowName": workflow_name,
            "Type": trigger["Type"],
            "Actions": [self.rewrite_reference(action) for action in trigger.get("Actions", [])],
            # On-demand triggers can't be started on creation
            "StartOnCreation": trigger["Type"] != "ON_DEMAND",
        }
        for key in ["Description", "Schedule", "EventBatchingCondition"]:
            if trigger.get(key) is not None:
                request[key] = copy.deepcopy(trigger[key])

        predicate = trigger.get("Predicate")
        if predicate:
            predicate = copy.deepcopy(predicate)
            if "Conditions" in predicate:
                predicate["Conditions"] = [self.rewrite_reference(cond) for cond in predicate["Conditions"]]
            request["Predicate"] = predicate
        return request

    def same_location(self) -> bool:
        """Are the source and target the same Glue endpoint?"""
        if self.source_glue is self.target_glue:
            return True
        return self.source_glue.meta.region_name == self.target_glue.meta.region_name

    def clone(self, workflow_name: str) -> CloneResult:
        """Clone a workflow: delete any stale copy, then create the workflow and its triggers

        Args:
            workflow_name (str): Name of the source workflow

        Returns:
            CloneResult: Summary of what was created
        """
        target_name = self.naming.workflow_name(workflow_name)
        if target_name == workflow_name and self.same_location():
            raise WorkflowCloneError(f"Clone of {workflow_name} would overwrite the source workflow")
        result = CloneResult(source_name=workflow_name, workflow_name=target_name)

        # Remove the target workflow if it already exists
        if target_name in self.list_workflows():
            self.log.warning(f"Workflow {target_name} already exists, replacing it...")
            self.delete_workflow(target_name)
            result.deleted_existing = True

        # Retrieve the workflow that has to be copied and create the new one
        source_workflow = self.get_workflow(self.source_glue, workflow_name)
        self.create_workflow(target_name, source_workflow)

        # Referenced jobs/crawlers are not checked, a missing one still gives a (broken) workflow
        for node in graph_nodes(source_workflow):
            node_name = self.naming.node_name(node)
            self.log.info(f"Name: {node_name}")
            result.nodes.append(node_name)

            trigger = node_trigger(node)
            if trigger:
                request = self.clone_trigger(trigger, target_name)
                self.log.debug(f"CreateTrigger: {request}")
                self.target_glue.create_trigger(**request)
                result.triggers.append(request["Name"])
        return result


if __name__ == "__main__":
    """Exercise the WorkflowCloner Class"""
    from pprint import pprint

    my_trigger = {
        "Name": "dev_start",
        "Type": "SCHEDULED",
        "Schedule": "cron(0 5 * * ? *)",
        "Actions": [{"JobName": "dev_ingest"}, {"CrawlerName": "dev_crawler"}],
    }
    my_cloner = WorkflowCloner(None, None, PrefixNaming("copy_", NameReplacer({"dev": "test"})))
    pprint(my_cloner.clone_trigger(my_trigger, "copy_dev_etl"))
